import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.components.page_render import RenderRulesAdapter, RulesPort
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("PAGE_RULES_PATH", str(self.base_dir / "rules.yaml")))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


def get_render_rules(rules: Rules = Depends(get_rules)) -> RulesPort:
    return RenderRulesAdapter(rules)
