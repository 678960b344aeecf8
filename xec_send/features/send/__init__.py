"""Send feature module for xec-send."""

from xec_send.features.send.address_params import (
    QueryParameters,
    parse_address_for_params,
)
from xec_send.features.send.builder import SendRequest, build_send_request
from xec_send.features.send.conversion import crypto_to_fiat, fiat_to_crypto
from xec_send.features.send.errors import classify_send_error
from xec_send.features.send.form import (
    FormContext,
    FormField,
    Multi,
    RouteParams,
    SendFormState,
    Single,
    from_route,
    update_field,
)
from xec_send.features.send.max_amount import calc_max_sendable, calculate_max_amount
from xec_send.features.send.message import MessageMode, truncate_message
from xec_send.features.send.recipients import (
    RecipientLine,
    normalize_recipient_batch,
)
from xec_send.features.send.service import SendOutcome, SendService
from xec_send.features.send.validators import (
    is_valid_address,
    is_valid_send_amount,
)

__all__ = [
    "QueryParameters",
    "parse_address_for_params",
    "SendRequest",
    "build_send_request",
    "crypto_to_fiat",
    "fiat_to_crypto",
    "classify_send_error",
    "FormContext",
    "FormField",
    "Multi",
    "RouteParams",
    "SendFormState",
    "Single",
    "from_route",
    "update_field",
    "calc_max_sendable",
    "calculate_max_amount",
    "MessageMode",
    "truncate_message",
    "RecipientLine",
    "normalize_recipient_batch",
    "SendOutcome",
    "SendService",
    "is_valid_address",
    "is_valid_send_amount",
]
