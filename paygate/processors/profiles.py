from paygate.models.payment import ProcessorKind, ProcessorProfile

_ATTEMPT_PREFIX = "Processing payment via {display}... Amount: {{amount:.2f}} {{currency}}, "

WALLET_TRANSFER = ProcessorProfile(
    kind=ProcessorKind.WALLET_TRANSFER,
    display_name="Wallet Transfer",
    required_fields=("email",),
    field_labels={"email": "email"},
    success_probability=0.8,
    primary_field="email",
    description_template=_ATTEMPT_PREFIX.format(display="Wallet Transfer") + "Email: {email}",
)

CARD_NETWORK = ProcessorProfile(
    kind=ProcessorKind.CARD_NETWORK,
    display_name="Card Network",
    required_fields=("cardNumber",),
    field_labels={"cardNumber": "card number"},
    success_probability=0.8,
    primary_field="cardNumber",
    description_template=_ATTEMPT_PREFIX.format(display="Card Network") + "Card Number: {cardNumber}",
)

# Bank transfers settle less reliably than wallet or card payments
BANK_TRANSFER = ProcessorProfile(
    kind=ProcessorKind.BANK_TRANSFER,
    display_name="Bank Transfer",
    required_fields=("accountNumber", "routingNumber"),
    field_labels={"accountNumber": "account number", "routingNumber": "routing number"},
    success_probability=0.5,
    primary_field="accountNumber",
    description_template=(
        _ATTEMPT_PREFIX.format(display="Bank Transfer")
        + "Account: {accountNumber}, Routing: {routingNumber}"
    ),
)

PROFILES: dict[ProcessorKind, ProcessorProfile] = {
    p.kind: p for p in (WALLET_TRANSFER, CARD_NETWORK, BANK_TRANSFER)
}
