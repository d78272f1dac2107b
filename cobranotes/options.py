"""
Classification settings for notes field extraction.

The built-in allow-list lives in `cobranotes.classifier`; `FieldRules` only
adds to it. None at call sites means "use `default_rules()`", which honours
the environment:

  export COBRANOTES_EXTRA_KEYS="Reaction Name,Pathway"
"""

from __future__ import annotations

import os
from typing import FrozenSet, Iterable, Optional

from pydantic import BaseModel, ConfigDict, field_validator

ENV_EXTRA_KEYS = "COBRANOTES_EXTRA_KEYS"


class FieldRules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Keys accepted verbatim on top of the built-in allow-list.
    extra_keys: FrozenSet[str] = frozenset()

    @field_validator("extra_keys", mode="before")
    @classmethod
    def _clean_keys(cls, value: Optional[Iterable[str]]) -> FrozenSet[str]:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = value.split(",")
        return frozenset(k.strip() for k in value if k and k.strip())

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "FieldRules":
        env = os.environ if environ is None else environ
        return cls(extra_keys=env.get(ENV_EXTRA_KEYS) or ())


def default_rules() -> FieldRules:
    return FieldRules.from_env()


__all__ = ["ENV_EXTRA_KEYS", "FieldRules", "default_rules"]
