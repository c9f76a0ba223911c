"""Currency constants shared by settings, the form and the API."""

BASE_CURRENCY = "USD"
DEFAULT_FROM_CURRENCY = "USD"
DEFAULT_TO_CURRENCY = "INR"
REQUIRED_CURRENCY_MESSAGE = "Please select a currency."
