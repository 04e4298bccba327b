from pathlib import Path
from typing import Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Managed RPC endpoints
    infura_project_id: str = Field(default="", description="Infura project id used for default endpoints")
    default_rpc_url_template: str = Field(
        default="https://{network}.infura.io/v3/{project_id}",
        description="Template for the default managed endpoint of a chain",
    )
    rpc_urls: Dict[int, str] = Field(
        default_factory=dict,
        description="Per-chain endpoint overrides, keyed by chain id",
    )
    request_timeout_seconds: float = Field(default=30, gt=0, description="JSON-RPC request timeout")

    # Pair defaults
    default_slippage: float = Field(default=0.005, ge=0, le=1, description="Default slippage tolerance")
    default_deadline_minutes: int = Field(default=20, ge=1, description="Default trade deadline in minutes")
    default_disable_multihops: bool = Field(default=False, description="Route through direct pairs only")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def has_infura_project_id(self) -> bool:
        return bool(self.infura_project_id)

    def rpc_url_for_chain(self, chain_id: int, network_name: str) -> Optional[str]:
        """Return the managed endpoint for a chain, or None when none is configured."""
        override = self.rpc_urls.get(chain_id)
        if override:
            return override
        if not self.has_infura_project_id:
            return None
        return self.default_rpc_url_template.format(
            network=network_name,
            project_id=self.infura_project_id,
        )


# Global settings instance
settings = Settings()
