# src/mention_checker/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple
from dotenv import load_dotenv

# Charger le .env depuis la racine du projet
load_dotenv()

def _float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value else default
    except ValueError:
        return default

def _int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value else default
    except ValueError:
        return default

def _origins(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return ("*",)
    origins = tuple(o.strip() for o in value.split(",") if o.strip())
    return origins or ("*",)

@dataclass(frozen=True)
class Settings:
    # Modèle Gemini (fixe pour tout le process)
    GEMINI_API_KEY: Optional[str] = None
    MODEL_NAME: str = "gemini-pro"
    TEMPERATURE: float = 0.0
    MAX_OUTPUT_TOKENS: int = 2048

    # Serveur
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    ALLOWED_ORIGINS: Tuple[str, ...] = ("*",)
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            GEMINI_API_KEY=env.get("GEMINI_API_KEY") or None,
            MODEL_NAME=env.get("MODEL_NAME") or cls.MODEL_NAME,
            TEMPERATURE=_float(env.get("TEMPERATURE"), cls.TEMPERATURE),
            MAX_OUTPUT_TOKENS=_int(env.get("MAX_OUTPUT_TOKENS"), cls.MAX_OUTPUT_TOKENS),
            HOST=env.get("HOST") or cls.HOST,
            PORT=_int(env.get("PORT"), cls.PORT),
            ALLOWED_ORIGINS=_origins(env.get("FRONTEND_ORIGIN")),
            LOG_LEVEL=(env.get("LOG_LEVEL") or cls.LOG_LEVEL).upper(),
        )

    @property
    def api_key_configured(self) -> bool:
        return bool(self.GEMINI_API_KEY)

settings = Settings.from_env()
