# jdl_angular/config.py
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jdl_angular.api.builders import PluralStyle


class GeneratorConfig(BaseSettings):
    """
    Settings for one `generate` run.

    Explicit keyword arguments (the CLI) win over JDL_* environment
    variables. `api_host` stays None when neither provides it, which is the
    CLI's cue to prompt for it.
    """

    jdl_file: Path
    output_folder: Path
    microservice: str
    api_host: Optional[str] = None
    plural_style: PluralStyle = PluralStyle.NAIVE
    strict: bool = False

    model_config = SettingsConfigDict(env_prefix="JDL_", extra="ignore")

    @field_validator("microservice")
    @classmethod
    def _microservice_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("microservice name must not be empty")
        return v

    @property
    def api_base_url(self) -> str:
        """`<host>/services/<microservice>/api`; relative to `/` without a host."""
        host = (self.api_host or "").rstrip("/")
        return f"{host}/services/{self.microservice}/api"
