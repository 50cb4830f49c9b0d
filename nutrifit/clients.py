"""Tagged client handles resolved once at startup.

A handle is either ``Configured(client)`` or ``Unconfigured(reason)``. Callers
check the tag explicitly instead of discovering a missing credential on first
use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from openai import OpenAI

from .config import Config

log = logging.getLogger(__name__)

C = TypeVar("C")


@dataclass(frozen=True)
class Configured(Generic[C]):
    client: C


@dataclass(frozen=True)
class Unconfigured:
    reason: str


ClientState = Union[Configured[Any], Unconfigured]


def is_configured(state: ClientState) -> bool:
    return isinstance(state, Configured)


def build_openai_client(cfg: Config) -> ClientState:
    if not cfg.openai_api_key:
        log.warning("OPENAI_API_KEY not set; Berry will answer with fallback advice only")
        return Unconfigured("OPENAI_API_KEY not set")
    return Configured(OpenAI(api_key=cfg.openai_api_key))


__all__ = ["Configured", "Unconfigured", "ClientState", "is_configured", "build_openai_client"]
