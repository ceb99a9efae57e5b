"""Binary codec between Python calendar values and PostgreSQL temporal types.

The package is split the same way the wire contract is: ``core`` holds the
shared errors, enums and time helpers, ``config`` the validated codec settings,
``codec`` the four encode/decode pairs and the byte-level wire types, and
``telemetry`` the logging setup.
"""

from .codec import (
    PG_EPOCH,
    PG_EPOCH_DATE,
    TemporalCodec,
    decode_date,
    decode_time,
    decode_timestamp,
    decode_timestamptz,
    encode_date,
    encode_time,
    encode_timestamp,
    encode_timestamptz,
)
from .core.enums import SqlType
from .core.errors import (
    DecodingOverflow,
    EncodingOverflow,
    TemporalCodecError,
    TimezoneAttachmentError,
)

__all__ = [
    "PG_EPOCH",
    "PG_EPOCH_DATE",
    "DecodingOverflow",
    "EncodingOverflow",
    "SqlType",
    "TemporalCodec",
    "TemporalCodecError",
    "TimezoneAttachmentError",
    "decode_date",
    "decode_time",
    "decode_timestamp",
    "decode_timestamptz",
    "encode_date",
    "encode_time",
    "encode_timestamp",
    "encode_timestamptz",
]
