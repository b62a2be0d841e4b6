import pytest
from httpx import AsyncClient

from pitchdeck_ai.llm.errors import LLMConfigurationError, LLMProviderError

pytestmark = pytest.mark.asyncio


class TestGenerate:
    async def test_generate_pitch_deck(self, client: AsyncClient, fake_provider, pitch_deck_payload, reply_for):
        fake_provider.replies = [reply_for(pitch_deck_payload)]

        response = await client.post("/api/generate", json={"prompt": "green packaging", "model": "mistral"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        deck = body["pitchDeck"]
        assert deck["id"] == "1"
        assert deck["startupName"] == "GreenBox"
        assert deck["originalPrompt"] == "green packaging"
        assert deck["marketSize"]["tam"] == "$240B"
        assert deck["businessModel"][0]["revenue"] == "$5M ARR"
        assert "revenue" not in deck["businessModel"][1]
        assert "generatedAt" in deck
        assert fake_provider.calls[0]["model"] == "mistral"

    async def test_generated_deck_is_listed(self, client: AsyncClient, fake_provider, pitch_deck_payload, reply_for):
        fake_provider.replies = [reply_for(pitch_deck_payload)]
        await client.post("/api/generate", json={"prompt": "green packaging"})

        decks = (await client.get("/api/decks")).json()

        assert [d["startupName"] for d in decks] == ["GreenBox"]

    @pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": "   "}])
    async def test_prompt_required(self, client: AsyncClient, fake_provider, body):
        response = await client.post("/api/generate", json=body)

        assert response.status_code == 400
        assert response.json() == {"detail": "Prompt is required"}
        assert fake_provider.calls == []

    async def test_parse_failure(self, client: AsyncClient, fake_provider):
        fake_provider.replies = ["I am unable to comply."]

        response = await client.post("/api/generate", json={"prompt": "x"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to parse AI response. Please try again.",
            "details": "The AI response was not in the expected format.",
        }

    async def test_missing_field(self, client: AsyncClient, fake_provider, pitch_deck_payload, reply_for):
        pitch_deck_payload["summary"] = ""
        fake_provider.replies = [reply_for(pitch_deck_payload)]

        response = await client.post("/api/generate", json={"prompt": "x"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "AI response missing required field: summary",
            "details": "Please try regenerating the pitch deck.",
        }

    async def test_backend_unreachable(self, client: AsyncClient, fake_provider):
        fake_provider.replies = [LLMProviderError("Failed to connect to Ollama service", details="refused")]

        response = await client.post("/api/generate", json={"prompt": "x"})

        assert response.status_code == 502
        assert response.json()["error"] == "Failed to connect to Ollama service"

    async def test_missing_api_key(self, client: AsyncClient, fake_provider):
        fake_provider.replies = [LLMConfigurationError("OPENROUTER_API_KEY not set")]

        response = await client.post("/api/generate", json={"prompt": "x"})

        assert response.status_code == 500
        assert response.json() == {"error": "OPENROUTER_API_KEY not set"}

    async def test_signed_in_quota(self, client: AsyncClient, fake_provider, storage, signed_in, pitch_deck_payload, reply_for):
        user, headers = signed_in
        fake_provider.replies = [reply_for(pitch_deck_payload) for _ in range(3)]

        for _ in range(3):
            assert (await client.post("/api/generate", json={"prompt": "x"}, headers=headers)).status_code == 200
        response = await client.post("/api/generate", json={"prompt": "x"}, headers=headers)

        assert response.status_code == 403
        assert response.json() == {"detail": "Usage limit reached for the free tier"}
        assert (await storage.get_user(user["id"])).pitch_decks_used == 3


class TestValidate:
    async def test_validate(self, client: AsyncClient, fake_provider, validation_payload, reply_for):
        fake_provider.replies = [reply_for(validation_payload)]

        response = await client.post("/api/validate", json={"idea": "reusable boxes"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        validation = body["validation"]
        assert validation["originalIdea"] == "reusable boxes"
        assert validation["validationScore"] == 82
        assert validation["recommendation"] == "go"
        assert validation["analysis"]["competitors"][1]["type"] == "indirect"
        assert "pitchDeck" not in validation
        assert "createdAt" in validation

    async def test_validate_with_pitch_deck(
        self, client: AsyncClient, fake_provider, validation_payload, pitch_deck_payload, reply_for
    ):
        fake_provider.replies = [reply_for(validation_payload), reply_for(pitch_deck_payload)]

        response = await client.post("/api/validate", json={"idea": "reusable boxes", "includesPitchDeck": True})

        deck = response.json()["validation"]["pitchDeck"]
        assert deck["startupName"] == "GreenBox"
        assert deck["originalPrompt"] == "reusable boxes"

    async def test_validate_accepts_snake_case(self, client: AsyncClient, fake_provider, validation_payload, reply_for):
        fake_provider.replies = [reply_for(validation_payload), "garbage"]

        response = await client.post("/api/validate", json={"idea": "x", "includes_pitch_deck": True})

        assert response.status_code == 200
        assert "pitchDeck" not in response.json()["validation"]
        assert len(fake_provider.calls) == 2

    async def test_idea_required(self, client: AsyncClient):
        response = await client.post("/api/validate", json={"idea": ""})

        assert response.status_code == 400
        assert response.json() == {"detail": "Business idea is required"}

    async def test_validation_parse_failure(self, client: AsyncClient, fake_provider):
        fake_provider.replies = ["nope"]

        response = await client.post("/api/validate", json={"idea": "x"})

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to parse AI response. Please try again."
