# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Security schemes, OAuth flows, and security requirements."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import Field as _Field

from oasmodel.model.base import ExtensibleRecord
from oasmodel.model.common import ParameterLocation

# ###############
# Public Interface
# ###############


class OAuthFlow(ExtensibleRecord):
    """Configuration of one OAuth 2.0 flow.

    Which URLs are mandatory depends on the flow; that is left to validators.
    """

    authorization_url: str | None = _Field(default=None, alias="authorizationUrl")
    token_url: str | None = _Field(default=None, alias="tokenUrl")
    refresh_url: str | None = _Field(default=None, alias="refreshUrl")
    scopes: dict[str, str]


class OAuthFlows(ExtensibleRecord):
    """The OAuth 2.0 flows a scheme supports."""

    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = _Field(default=None, alias="clientCredentials")
    authorization_code: OAuthFlow | None = _Field(default=None, alias="authorizationCode")


class ApiKeySecurityScheme(ExtensibleRecord):
    """An API key passed in a header, query parameter, or cookie."""

    wire_required = frozenset({"type"})

    type: Literal["apiKey"] = "apiKey"
    description: str | None = None
    name: str
    location: ParameterLocation = _Field(alias="in")


class HttpSecurityScheme(ExtensibleRecord):
    """An HTTP authentication scheme such as ``basic`` or ``bearer``."""

    wire_required = frozenset({"type"})

    type: Literal["http"] = "http"
    description: str | None = None
    scheme: str
    bearer_format: str | None = _Field(default=None, alias="bearerFormat")


class OAuth2SecurityScheme(ExtensibleRecord):
    wire_required = frozenset({"type"})

    type: Literal["oauth2"] = "oauth2"
    description: str | None = None
    flows: OAuthFlows


class OpenIdConnectSecurityScheme(ExtensibleRecord):
    wire_required = frozenset({"type"})

    type: Literal["openIdConnect"] = "openIdConnect"
    description: str | None = None
    open_id_connect_url: str = _Field(alias="openIdConnectUrl")


# A security scheme, tagged on the wire by its ``type`` key.
SecurityScheme = Union[ApiKeySecurityScheme, HttpSecurityScheme, OAuth2SecurityScheme, OpenIdConnectSecurityScheme]

# Scheme name -> scopes required from that scheme.
SecurityRequirement = dict[str, list[str]]
