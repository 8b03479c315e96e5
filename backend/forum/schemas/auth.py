"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

USERNAME_MAX = 50
PASSWORD_MAX = 128


class _CredentialsSchema(Schema):
    # Unknown keys are dropped; whitespace-only usernames are rejected by the service
    class Meta:
        unknown = EXCLUDE

    username = fields.String(required=True, validate=validate.Length(min=1, max=USERNAME_MAX))
    password = fields.String(required=True, validate=validate.Length(min=1, max=PASSWORD_MAX))


class RegisterSchema(_CredentialsSchema):
    """Input payload for account registration."""


class LoginSchema(_CredentialsSchema):
    """Input payload for authenticating a user."""


class TokenResponseSchema(Schema):
    access_token = fields.String(required=True)
    token_type = fields.String(dump_default="bearer")
    expires_at = fields.AwareDateTime(required=True)


class UserSchema(Schema):
    """Public view of a user. ``password_hash`` is not a field here."""

    id = fields.Integer(required=True)
    username = fields.String(required=True)
    created_at = fields.DateTime(allow_none=True)
