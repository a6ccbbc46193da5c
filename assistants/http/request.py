import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from assistants.config import ClientConfig
from .errors import RequestValidationError


def _frozen(headers: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(headers))


@dataclass(frozen=True)
class HeaderProfiles:
    """
    Header sets built once per client from its configuration.

    mutating: JSON body + feature-version header
    read:     feature-version header only
    upload:   multipart (requests fills in Content-Type with the boundary)
    Every profile carries the bearer credential and, if set, the organization.
    """
    mutating: Mapping[str, str]
    read: Mapping[str, str]
    upload: Mapping[str, str]

    @classmethod
    def from_config(cls, config: ClientConfig) -> "HeaderProfiles":
        auth = {"Authorization": f"Bearer {config.api_key}"}
        if config.organization:
            auth["OpenAI-Organization"] = config.organization

        beta = {"OpenAI-Beta": config.beta_version}

        return cls(
            mutating=_frozen({**auth, "Content-Type": "application/json", **beta}),
            read=_frozen({**auth, **beta}),
            upload=_frozen({**auth, **beta}),
        )


@dataclass(frozen=True)
class Request:
    """
    One logical request. Immutable once built; every retry attempt sends
    exactly the same method, target, encoded body and headers.

    The JSON body is encoded once at construction, so later changes to the
    caller's dict never reach the wire. Multipart uploads carry their file
    content as bytes for the same reason.
    """
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[Any] = None
    files: Optional[Dict[str, Tuple[str, bytes]]] = None
    data: Optional[Dict[str, str]] = None
    content: Optional[bytes] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", _frozen(self.headers))
        if self.body is not None:
            try:
                encoded = json.dumps(self.body).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise RequestValidationError(f"Request body is not JSON-serializable: {e}") from e
            object.__setattr__(self, "content", encoded)
        if self.files is not None:
            object.__setattr__(self, "files", dict(self.files))
        if self.data is not None:
            object.__setattr__(self, "data", dict(self.data))

    @property
    def is_multipart(self) -> bool:
        return self.files is not None

    def describe(self) -> str:
        return f"{self.method} {self.url}"
