"""Configuration record persisted in the user's home directory."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from jiracl_core.errors import ConfigFileError


API_VERSION = "2"
DEFAULT_CONFIG_FILE_NAME = ".jira-cl.json"

BoardId = Union[int, str]


class Protocol(str, Enum):
    """Protocol used to reach the Jira host."""

    HTTP = "http"
    HTTPS = "https"


@dataclass
class ConfigRecord:
    """
    Connection settings of the Jira client.

    Attribute names are snake_case; the JSON file keeps the keys the
    client has always written (apiVersion, strictSSL, defaultBoard).
    """

    protocol: Protocol
    host: str
    username: str
    password: str = field(repr=False)
    api_version: str = API_VERSION
    strict_ssl: bool = True
    default_board: Optional[BoardId] = None
    proxy: Optional[str] = None

    @property
    def base_url(self) -> str:
        """Get the Jira base URL, e.g. https://example.atlassian.net."""
        return f"{self.protocol.value}://{self.host}"

    @property
    def has_default_board(self) -> bool:
        """Check if a default board is stored."""
        return self.default_board is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the on-disk representation. Unset optional fields are left out."""
        data: dict[str, Any] = {
            "protocol": self.protocol.value,
            "host": self.host,
            "username": self.username,
            "password": self.password,
            "apiVersion": self.api_version,
            "strictSSL": self.strict_ssl,
        }
        if self.default_board is not None:
            data["defaultBoard"] = self.default_board
        if self.proxy is not None:
            data["proxy"] = self.proxy
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConfigRecord":
        """
        Build a record from the parsed config file.

        Raises:
            ConfigFileError: if a required key is missing or the protocol is unknown
        """
        missing = [key for key in ("protocol", "host", "username", "password") if key not in data]
        if missing:
            raise ConfigFileError(f"Config file is missing required keys: {', '.join(missing)}")

        for key in ("host", "username", "password"):
            if not isinstance(data[key], str):
                raise ConfigFileError(f"Config key '{key}' must be a string")
        for key in ("host", "username"):
            if not data[key].strip():
                raise ConfigFileError(f"Config key '{key}' must not be empty")

        try:
            protocol = Protocol(data["protocol"])
        except ValueError:
            raise ConfigFileError(f"Unknown protocol in config file: {data['protocol']!r}") from None

        return cls(
            protocol=protocol,
            host=data["host"],
            username=data["username"],
            password=data["password"],
            api_version=data.get("apiVersion", API_VERSION),
            strict_ssl=data.get("strictSSL", True),
            default_board=data.get("defaultBoard"),
            proxy=data.get("proxy"),
        )


def record_from_answers(answers: dict[str, Any]) -> ConfigRecord:
    """
    Build a new record from the first-run prompt answers.

    Args:
        answers: Mapping with host, username, password and https_enabled

    Returns:
        ConfigRecord with the fixed api version and strict SSL enabled
    """
    protocol = Protocol.HTTPS if answers["https_enabled"] else Protocol.HTTP

    return ConfigRecord(
        protocol=protocol,
        host=answers["host"].strip(),
        username=answers["username"].strip(),
        password=answers["password"].strip(),
        api_version=API_VERSION,
        strict_ssl=True,
    )
