"""Models describing the appsettings.json configuration file."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

SANDBOX_ENVIRONMENT = "Sandbox"


class ServiceDeskConfig(BaseModel):
    """Endpoints and credentials for the service desk API."""

    model_config = ConfigDict(frozen=True)

    sandbox_url: str = Field(alias="SandboxUrl")
    production_url: str = Field(alias="ProductionUrl")
    username: str = Field(alias="Username")
    password: str = Field(alias="Password")
    user_id: str = Field(alias="UserID")


class TopDeskConfig(BaseModel):
    """Ticketing system endpoint, only carried through configuration for now."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(alias="BaseUrl")
    username: str = Field(alias="Username")
    password: str = Field(alias="Password")


class AppSettings(BaseModel):
    """Root of the configuration file."""

    model_config = ConfigDict(frozen=True)

    environment: str = Field(alias="Environment")
    service_desk: ServiceDeskConfig = Field(alias="ServiceDesk")
    top_desk: TopDeskConfig = Field(alias="TopDesk")

    @property
    def is_sandbox(self) -> bool:
        return self.environment == SANDBOX_ENVIRONMENT

    @property
    def service_desk_url(self) -> str:
        """Base URL of the service desk for the selected environment."""

        if self.is_sandbox:
            return self.service_desk.sandbox_url
        return self.service_desk.production_url

    def summary(self) -> Dict[str, str]:
        """Printable view of the settings, without any password."""

        return {
            "Environment": self.environment,
            "ServiceDesk URL": self.service_desk_url,
            "ServiceDesk user": self.service_desk.username,
            "ServiceDesk user id": self.service_desk.user_id,
            "TopDesk Base URL": self.top_desk.base_url,
        }
