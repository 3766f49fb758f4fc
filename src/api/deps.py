import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.components.taghelpers import TagHelperRunner, create_default_runner
from src.rules.loader import load_rules_or_default
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("XPC_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules_or_default(settings.rules_path)


# --- Runner ---
def get_runner(rules: Rules = Depends(get_rules)) -> TagHelperRunner:
    return create_default_runner(rules)
