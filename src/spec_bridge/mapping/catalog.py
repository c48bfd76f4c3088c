"""Known Converge to Elavon mappings.

These correspondences come from the migration guides rather than from the
specification documents. They cover credentials and transaction endpoints
that the Converge documents describe only loosely.
"""

from dataclasses import dataclass, field
from enum import Enum

from spec_bridge.mapping.models import ApiMapping, MappingType


class VariableKind(Enum):
    """Role of a legacy request or response variable."""

    CREDENTIAL = "credential"
    PARAMETER = "parameter"
    RESPONSE_FIELD = "response_field"


@dataclass(frozen=True)
class VariableMapping:
    """A legacy variable and its replacement."""

    source_variable: str
    target_variable: str
    kind: VariableKind
    confidence: float
    description: str
    example: str = ""


@dataclass(frozen=True)
class EndpointMapping:
    """A legacy endpoint and the endpoint that replaces it."""

    source_path: str
    source_method: str
    target_path: str
    target_method: str
    description: str
    confidence: float
    notes: list[str] = field(default_factory=list)


VARIABLE_MAPPINGS: tuple[VariableMapping, ...] = (
    VariableMapping(
        "ssl_merchant_id",
        "merchantId",
        VariableKind.CREDENTIAL,
        1.0,
        "Merchant identifier for authentication",
        'ssl_merchant_id="12345" → merchantId: "12345"',
    ),
    VariableMapping(
        "ssl_user_id",
        "userId",
        VariableKind.CREDENTIAL,
        1.0,
        "User identifier for authentication",
        'ssl_user_id="user123" → userId: "user123"',
    ),
    VariableMapping(
        "ssl_pin",
        "apiKey",
        VariableKind.CREDENTIAL,
        0.9,
        "Authentication PIN/API Key",
        'ssl_pin="secret" → apiKey: "secret"',
    ),
    VariableMapping(
        "ssl_amount",
        "amount",
        VariableKind.PARAMETER,
        1.0,
        "Transaction amount",
        'ssl_amount="10.00" → amount: "10.00"',
    ),
    VariableMapping(
        "ssl_card_number",
        "cardNumber",
        VariableKind.PARAMETER,
        1.0,
        "Credit card number",
        'ssl_card_number="4111111111111111" → cardNumber: "4111111111111111"',
    ),
    VariableMapping(
        "ssl_exp_date",
        "expirationDate",
        VariableKind.PARAMETER,
        1.0,
        "Card expiration date",
        'ssl_exp_date="1225" → expirationDate: "12/25"',
    ),
    VariableMapping(
        "ssl_cvv2cvc2",
        "securityCode",
        VariableKind.PARAMETER,
        1.0,
        "Card security code",
        'ssl_cvv2cvc2="123" → securityCode: "123"',
    ),
    VariableMapping(
        "ssl_transaction_type",
        "transactionType",
        VariableKind.PARAMETER,
        0.9,
        "Type of transaction (sale, auth, etc.)",
        'ssl_transaction_type="ccsale" → transactionType: "sale"',
    ),
    VariableMapping(
        "ssl_result",
        "state",
        VariableKind.RESPONSE_FIELD,
        0.8,
        "Transaction result status",
        'ssl_result="0" → state: "authorized"',
    ),
    VariableMapping(
        "ssl_txn_id",
        "transactionId",
        VariableKind.RESPONSE_FIELD,
        1.0,
        "Unique transaction identifier",
        'ssl_txn_id="12345" → transactionId: "12345"',
    ),
)

ENDPOINT_MAPPINGS: tuple[EndpointMapping, ...] = (
    EndpointMapping(
        source_path="/api/converge/sale",
        source_method="POST",
        target_path="/transactions",
        target_method="POST",
        description="Create a new transaction (sale)",
        confidence=0.95,
        notes=[
            "Converge sale endpoint maps to Elavon transactions endpoint",
            "Set doCapture: true for immediate capture",
            "Use card object for payment details",
        ],
    ),
    EndpointMapping(
        source_path="/api/converge/auth",
        source_method="POST",
        target_path="/transactions",
        target_method="POST",
        description="Create a new transaction (authorization only)",
        confidence=0.95,
        notes=[
            "Converge auth endpoint maps to Elavon transactions endpoint",
            "Set doCapture: false for authorization only",
            "Use card object for payment details",
        ],
    ),
    EndpointMapping(
        source_path="/api/converge/refund",
        source_method="POST",
        target_path="/transactions",
        target_method="POST",
        description="Create a refund transaction",
        confidence=0.9,
        notes=[
            "Converge refund endpoint maps to Elavon transactions endpoint",
            'Set type: "refund" in transaction object',
            "Reference original transaction ID",
        ],
    ),
    EndpointMapping(
        source_path="/api/converge/void",
        source_method="POST",
        target_path="/transactions/{id}",
        target_method="POST",
        description="Update transaction to void status",
        confidence=0.85,
        notes=[
            "Converge void maps to Elavon transaction update",
            "Use transaction ID in URL path",
            "Set appropriate void parameters",
        ],
    ),
    EndpointMapping(
        source_path="/api/converge/capture",
        source_method="POST",
        target_path="/transactions/{id}",
        target_method="POST",
        description="Update transaction to capture",
        confidence=0.9,
        notes=[
            "Converge capture maps to Elavon transaction update",
            "Use transaction ID in URL path",
            "Set doCapture: true or capture amount",
        ],
    ),
)


def _endpoint_api_mapping(endpoint: EndpointMapping) -> ApiMapping:
    return ApiMapping(
        source_endpoint=endpoint.source_path,
        target_endpoint=endpoint.target_path,
        confidence=endpoint.confidence,
        mapping_type=MappingType.EXACT,
        transformation_required=True,
        migration_notes=list(endpoint.notes),
    )


def predefined_api_mappings() -> list[ApiMapping]:
    """Get the catalog endpoint mappings as API mappings."""
    return [_endpoint_api_mapping(endpoint) for endpoint in ENDPOINT_MAPPINGS]


def find_known_mapping(pattern: str) -> ApiMapping | None:
    """Look up a legacy endpoint or variable in the catalog.

    Endpoints are checked first and match when either the pattern contains
    the endpoint path or the path contains the pattern (case-insensitive).
    Variables match when the pattern contains the variable name.

    Args:
        pattern: Endpoint path, variable name or code fragment

    Returns:
        ApiMapping for the first catalog hit, or None
    """
    needle = pattern.lower()
    if not needle:
        return None

    for endpoint in ENDPOINT_MAPPINGS:
        path = endpoint.source_path.lower()
        if needle in path or path in needle:
            return _endpoint_api_mapping(endpoint)

    for variable in VARIABLE_MAPPINGS:
        if variable.source_variable.lower() in needle:
            return ApiMapping(
                source_endpoint=pattern,
                target_endpoint=variable.target_variable,
                confidence=variable.confidence,
                mapping_type=MappingType.EXACT,
                transformation_required=True,
                migration_notes=[variable.description, variable.example],
            )

    return None
