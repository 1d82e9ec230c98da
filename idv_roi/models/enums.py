from enum import Enum


class Industry(str, Enum):
    HEALTHCARE = "healthcare"
    FINANCIAL = "financial"
    FINTECH = "fintech"
    ECOMMERCE = "ecommerce"
    GAMING = "gaming"
    GENERAL = "general"


class CompanySize(str, Enum):
    STARTUP = "startup"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class TableVariant(str, Enum):
    BASE = "base"
    ENHANCED = "enhanced"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InsightSeverity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
