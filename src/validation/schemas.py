"""Request schemas as pydantic models and the registry routes look them up from.

Each endpoint has one ``RequestModel`` whose fields are the request regions
it constrains (``params``, ``query``, ``body``), each a ``RegionModel``.
Regions are validated in field order, so issues come out params first.
Client-facing wording lives in ``error_messages``, keyed by field and
pydantic error type; anything unmapped keeps pydantic's own message.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import ErrorDetails, PydanticCustomError

from src.validation.issues import ISSUE_SEPARATOR

NUMERIC_ID_PATTERN = r"^[0-9]+$"
PASSWORD_ALPHABET = re.compile(r"[a-zA-Z0-9!@#$%^&*]+")


class UnknownSchemaError(KeyError):
    """Raised when a schema name is not registered."""


def multi_issue_error(error_type: str, messages: list[str]) -> PydanticCustomError:
    """One pydantic error carrying several issue messages for the same field."""

    return PydanticCustomError(
        error_type,
        "{summary}",
        {"summary": ISSUE_SEPARATOR.join(messages), "issues": list(messages)},
    )


class RegionModel(BaseModel):
    """Accepted shape of one request region."""

    model_config = ConfigDict(strict=True)

    error_messages: ClassVar[dict[str, dict[str, str]]] = {}


class RequestModel(BaseModel):
    """Accepted shape of a request's ``(body, query, params)`` triple."""

    region_messages: ClassVar[dict[str, str]] = {
        "model_type": "Request {region} must be an object",
        "model_attributes_type": "Request {region} must be an object",
        "missing": "Request {region} is required",
    }

    @classmethod
    def message_for(cls, error: ErrorDetails) -> str:
        """Client-facing message for one entry of ``ValidationError.errors()``."""

        loc = error["loc"]
        if len(loc) == 1:
            template = cls.region_messages.get(error["type"])
            return template.format(region=loc[0]) if template else error["msg"]

        field = cls.model_fields.get(str(loc[0]))
        region = field.annotation if field is not None else None
        if isinstance(region, type) and issubclass(region, RegionModel):
            messages = region.error_messages.get(str(loc[1]), {})
            return messages.get(error["type"], error["msg"])
        return error["msg"]


# Products


class CreateProductBody(RegionModel):
    id: int = Field(..., gt=0)
    name: str = Field(..., min_length=2)
    price: float = Field(..., ge=0, allow_inf_nan=False)

    error_messages = {
        "id": {
            "missing": "ID must be a number",
            "int_type": "ID must be a number",
            "greater_than": "ID must be positive",
        },
        "name": {
            "missing": "Name is required",
            "string_type": "Name is required",
            "string_too_short": "Name must be at least 2 characters long",
        },
        "price": {
            "missing": "Price must be a number",
            "float_type": "Price must be a number",
            "finite_number": "Price must be a number",
            "greater_than_equal": "Price cannot be negative",
        },
    }

    @field_validator("id", mode="before")
    @classmethod
    def _reject_fractional_ids(cls, value: Any) -> Any:
        # JSON numbers with a decimal point or exponent decode as floats
        if isinstance(value, float):
            raise PydanticCustomError("int_from_float", "ID must be an integer")
        return value


class UpdateProductBody(RegionModel):
    """Both fields optional; an explicit ``null`` is still rejected."""

    name: str = Field(None, min_length=2)
    price: float = Field(None, ge=0, allow_inf_nan=False)


class ProductIdParams(RegionModel):
    id: str = Field(..., pattern=NUMERIC_ID_PATTERN)

    error_messages = {
        "id": {"string_pattern_mismatch": "ID in URL must be a numeric string"},
    }


class CreateProductRequest(RequestModel):
    body: CreateProductBody


class UpdateProductRequest(RequestModel):
    params: ProductIdParams
    body: UpdateProductBody


class DeleteProductRequest(RequestModel):
    params: ProductIdParams


# Registration


class RegisterBody(RegionModel):
    username: str = Field(..., min_length=3, max_length=15)
    password: str

    error_messages = {
        "username": {
            "missing": "Username is required",
            "string_type": "Username is required",
            "string_too_short": "Username must be at least 3 characters long",
            "string_too_long": "Username cannot exceed 15 characters",
        },
        "password": {
            "missing": "Password is required",
            "string_type": "Password is required",
        },
    }

    @field_validator("password")
    @classmethod
    def _password_policy(cls, value: str) -> str:
        problems = []
        if len(value) < 6:
            problems.append("Password must be at least 6 characters long")
        if len(value) > 15:
            problems.append("Password cannot exceed 15 characters")
        if not any("A" <= char <= "Z" for char in value):
            problems.append("Password must contain at least one uppercase letter")
        if PASSWORD_ALPHABET.fullmatch(value) is None:
            problems.append("Password must be in English only")
        if problems:
            raise multi_issue_error("password_policy", problems)
        return value


class RegisterRequest(RequestModel):
    body: RegisterBody


class SchemaRegistry:
    """In-process registry: schema name -> ``RequestModel`` subclass."""

    def __init__(self) -> None:
        self._models: dict[str, type[RequestModel]] = {}

    def register(
        self,
        name: str,
        model: type[RequestModel],
        *,
        override: bool = False,
    ) -> type[RequestModel]:
        """Register ``model`` under ``name``.

        Raises:
            ValueError: If ``name`` is already registered and override is False.
        """
        if name in self._models and not override:
            raise ValueError(f"Schema already registered: {name!r}")
        self._models[name] = model
        return model

    def get(self, name: str) -> type[RequestModel]:
        """Return the model registered as ``name``.

        Raises:
            UnknownSchemaError: If nothing is registered under ``name``.
        """
        try:
            return self._models[name]
        except KeyError:
            raise UnknownSchemaError(f"Unknown schema: {name!r}") from None

    def validate(self, name: str, request_input: dict[str, Any]) -> RequestModel:
        """Validate ``request_input`` against the model for ``name``."""
        return self.get(name).model_validate(request_input)

    def names(self) -> list[str]:
        return list(self._models)

    def __contains__(self, name: object) -> bool:
        return name in self._models

    def __len__(self) -> int:
        return len(self._models)


def build_default_registry() -> SchemaRegistry:
    """Registry holding the schema of every validated endpoint."""

    registry = SchemaRegistry()
    registry.register("create_product", CreateProductRequest)
    registry.register("update_product", UpdateProductRequest)
    registry.register("delete_product", DeleteProductRequest)
    registry.register("register", RegisterRequest)
    return registry


schema_registry = build_default_registry()
