"""Pydantic models describing the Consul ACL binding rule payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_to_blank(value: object) -> object:
    return "" if value is None else value


class ConsulBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class BindingRulePayload(ConsulBaseModel):
    id: str = Field(alias="ID")
    idp_name: str = Field(default="", alias="IDPName")
    description: str = Field(default="", alias="Description")
    role_bind_type: str = Field(default="", alias="RoleBindType")
    role_name: str = Field(default="", alias="RoleName")
    selector: str = Field(default="", alias="Selector")
    hash: str | None = Field(default=None, alias="Hash")
    create_index: int = Field(default=0, alias="CreateIndex")
    modify_index: int = Field(default=0, alias="ModifyIndex")

    _normalize_strings = field_validator(
        "idp_name",
        "description",
        "role_bind_type",
        "role_name",
        "selector",
        mode="before",
    )(_none_to_blank)


class BindingRuleSummary(ConsulBaseModel):
    """Entry of the binding rule listing; only the id is needed for resolution."""

    id: str = Field(alias="ID")
