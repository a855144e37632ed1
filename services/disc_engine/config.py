from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal
import os

# Load .env file if it exists, for local development
# Otherwise settings come from the environment or the defaults below.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

class EngineSettings(BaseSettings):
    question_bank_path: str = "assets/disc_questions.yml"
    secondary_threshold: int = 15  # Gap under which the runner-up is reported as secondary
    adaptive_threshold: int = 10   # Gap under which the adaptive questions are administered
    blend_threshold: int = 20      # Gap under which the wheel picks a blended archetype
    default_locale: Literal['fr', 'en'] = 'fr'
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(env_prefix='DISC_')
