"""Process configuration for the HubSpot practicum server.

Values are read once at startup from the environment (and a local ``.env``
file) and frozen, so the same object can be handed to the HubSpot client and
shared by every request.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Immutable application settings."""

    model_config = SettingsConfigDict(
        extra='ignore',
        case_sensitive=False,
        frozen=True,
        env_file='.env',
        env_file_encoding='utf-8',
    )

    private_app_access_token: str = Field(
        default='',
        description='Bearer token of the HubSpot private app.',
    )
    port: int = Field(default=3000, ge=1, le=65535)
    hubspot_base_url: str = Field(default='https://api.hubapi.com', min_length=8)
    custom_object_type: str = Field(
        default='2-42445264',
        min_length=1,
        description='Object type id of the custom object (pets).',
    )
    list_properties: tuple = ('name', 'type', 'bio')
    list_limit: int = Field(default=100, ge=1)
    log_level: str = 'INFO'

    @field_validator('hubspot_base_url')
    @classmethod
    def _strip_trailing_slash(cls, value):
        return value.rstrip('/')

    @property
    def objects_url(self):
        return f'{self.hubspot_base_url}/crm/v3/objects/{self.custom_object_type}'
