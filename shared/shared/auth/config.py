from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_files() -> list[str]:
    """The repo-root .env (shared with services/social) first, then one in the CWD."""
    repo_root = Path(__file__).resolve().parents[3]  # shared/shared/auth/ -> repo root
    return [str(repo_root / ".env"), ".env"]


class AuthSettings(BaseSettings):
    """Token verification settings for the shared bearer decoder.

    Must agree with the issuing service's JWT_* settings (app.config.Settings),
    otherwise every token is treated as anonymous.
    """

    model_config = SettingsConfigDict(
        env_prefix="JWT_",
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    secret: str = "change-me"
    algorithm: str = "HS256"
    # Claims stamped by create_access_token alongside sub/username/roles/sid
    issuer: str = "huddle-social"
    audience: str = "huddle-clients"
