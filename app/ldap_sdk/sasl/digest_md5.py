"""DIGEST-MD5 bind request properties.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SecretBytes, field_validator

from .enums import SASLMethod, SASLQualityOfProtection

DEFAULT_QOP: tuple[SASLQualityOfProtection, ...] = (
    SASLQualityOfProtection.AUTH,
)


class DigestMD5BindRequestProperties(BaseModel):
    """Properties used to perform a DIGEST-MD5 SASL bind.

    `authentication_id` is conventionally `dn:<full DN>` or `u:<username>`,
    the value is passed to the server as is. An empty password is kept as
    an empty byte string, which is how anonymous binds are expressed.

    `authorization_id` and `realm` are None when not requested, an empty
    string is a distinct, explicit value.

    `allowed_qop` is ordered most preferred first.

    Every assignment is validated, so fields are normalized the same way
    as on construction and a rejected value leaves the object unchanged.
    Instances are not safe for concurrent mutation.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        hide_input_in_errors=True,
    )

    mechanism: ClassVar[SASLMethod] = SASLMethod.DIGEST_MD5

    authentication_id: str
    password: SecretBytes = SecretBytes(b"")
    authorization_id: str | None = None
    realm: str | None = None
    allowed_qop: tuple[SASLQualityOfProtection, ...] = DEFAULT_QOP

    def __init__(
        self,
        authentication_id: str | None,
        password: str | bytes | SecretBytes | None = None,
        **data: Any,
    ) -> None:
        """Create properties.

        Args:
            authentication_id (str | None): identity to authenticate as,\
                required
            password (str | bytes | SecretBytes | None): secret, text is\
                encoded as UTF-8, None means an empty secret
            **data: `authorization_id`, `realm`, `allowed_qop`
        """
        super().__init__(
            authentication_id=authentication_id,
            password=password,
            **data,
        )

    @field_validator("authentication_id", mode="before")
    @classmethod
    def validate_authentication_id(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("authentication ID is required")
        return value

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, value: Any) -> Any:
        if value is None:
            return b""
        if isinstance(value, SecretBytes):
            return value.get_secret_value()
        if isinstance(value, str):
            # undecodable argv bytes arrive as escaped surrogates
            try:
                return value.encode("utf-8", "surrogateescape")
            except UnicodeEncodeError:
                return value.encode("utf-8", "surrogatepass")
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        return value

    @field_validator("allowed_qop", mode="before")
    @classmethod
    def validate_allowed_qop(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = SASLQualityOfProtection.decode_list(value)
        if value is None:
            return DEFAULT_QOP
        return tuple(value) or DEFAULT_QOP

    def set_allowed_qop(self, *allowed_qop: SASLQualityOfProtection) -> None:
        """Set allowed QoP from arguments, most preferred first.

        Called without arguments it restores the default.
        """
        self.allowed_qop = allowed_qop

    def __str__(self) -> str:
        """Render properties on a single line, the password is omitted."""
        authentication_id = getattr(self, "authentication_id", None)
        authorization_id = getattr(self, "authorization_id", None)
        realm = getattr(self, "realm", None)
        allowed_qop = getattr(self, "allowed_qop", ())

        fields = [f"authentication_id='{authentication_id}'"]

        if authorization_id is not None:
            fields.append(f"authorization_id='{authorization_id}'")

        if realm is not None:
            fields.append(f"realm='{realm}'")

        qop = SASLQualityOfProtection.to_string(allowed_qop)
        fields.append(f"qop='{qop}'")
        return f"{type(self).__name__}({', '.join(fields)})"

    __repr__ = __str__
