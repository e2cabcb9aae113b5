PRICE_QUANTUM_DIGITS = 2
BUYER_COMPANY_MAX_LENGTH = 200

INSUFFICIENT_STOCK_MESSAGE = "Not enough stock available for this sale."
