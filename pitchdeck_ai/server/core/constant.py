PROJECT_NAME = "PitchDeck-AI"
API_PREFIX = "/api"
VERSION = "1.0.0"
SCHEMA_VERSION = "v1"
