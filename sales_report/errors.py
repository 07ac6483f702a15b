class AnalysisError(ValueError):
    """Base class for everything analyze_sales_data raises on bad input."""


class InvalidDataError(AnalysisError):
    """Raised when the dataset is missing, misshapen, or has invalid records."""


class MissingOptionsError(AnalysisError):
    """Raised when the revenue or bonus strategy is not configured."""


class UnknownReferenceError(AnalysisError, LookupError):
    """Raised when a purchase record points at a seller or SKU not in the catalog."""


class UnknownSellerError(UnknownReferenceError):
    pass


class UnknownProductError(UnknownReferenceError):
    pass
