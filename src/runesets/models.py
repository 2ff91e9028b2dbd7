import logging
from typing import Any

from pydantic import BaseModel, Field, model_validator

from runesets.catalog import get_charset, has_charset
from runesets.sampler import Sampler, default_sampler

logger = logging.getLogger(__name__)

_INT_FIELDS = ("length", "count")


def _validate_no_bool_ints(data: Any) -> None:
    if not isinstance(data, dict):
        return

    for field_name in _INT_FIELDS:
        if isinstance(data.get(field_name), bool):
            raise ValueError(f"{field_name}: bool is not allowed")


class SampleRequest(BaseModel):
    charset: str = Field(description="Catalog name, or a literal set")
    literal: bool = Field(
        default=False, description="Treat charset as literal characters"
    )
    length: int = Field(default=16, ge=0)
    count: int = Field(default=1, ge=1)
    seed: int | None = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def validate_input(cls, data: Any) -> Any:
        _validate_no_bool_ints(data)
        return data

    @model_validator(mode="after")
    def validate_charset(self) -> "SampleRequest":
        if self.literal:
            if not self.charset:
                raise ValueError("charset must not be empty")
        elif not has_charset(self.charset):
            raise ValueError(
                f"unknown charset '{self.charset}'; "
                "pass literal=True to sample from its characters"
            )
        return self

    def resolved_charset(self) -> str:
        if self.literal:
            return self.charset
        return get_charset(self.charset)


class SampleRecord(BaseModel):
    charset: str = Field(description="Charset name or literal as requested")
    length: int
    seed: int | None = Field(default=None)
    index: int = Field(description="Position within the request's batch")
    text: str
    code_points: list[int]


def generate_samples(
    request: SampleRequest, sampler: Sampler | None = None
) -> list[SampleRecord]:
    if sampler is None:
        if request.seed is not None:
            sampler = Sampler(seed=request.seed)
        else:
            sampler = default_sampler()

    chars = request.resolved_charset()
    records: list[SampleRecord] = []
    for index in range(request.count):
        runes = sampler.random_runes(request.length, chars)
        records.append(
            SampleRecord(
                charset=request.charset,
                length=request.length,
                seed=request.seed,
                index=index,
                text="".join(runes),
                code_points=[ord(r) for r in runes],
            )
        )
    logger.debug(
        "generated %d samples of length %d from %d code points",
        len(records),
        request.length,
        len(chars),
    )
    return records
