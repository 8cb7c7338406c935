"""Header names, language codes and the catalogue of service error codes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HeaderList:
    """Names of the HTTP headers the services read from incoming requests."""

    authorization: str = "Authorization"
    trace_id: str = "X-Trace-Id"
    span_id: str = "X-Span-Id"
    device_id: str = "device-id"
    device_os: str = "device-os"
    device_model: str = "device-model"
    device_brand: str = "device-brand"
    user_agent: str = "User-Agent"
    app_version: str = "app-version"
    language: str = "language"
    latitude: str = "latitude"
    longitude: str = "longitude"
    channel: str = "channel"
    forward: str = "X-Forwarded-For"
    x_auth: str = "X-Auth-Token"


HEADER = HeaderList()

LANG_INDONESIA = "id"
LANG_ENGLISH = "en"
LANG_ARABIC = "ar"
LANG_ALBANIAN = "sq"
LANG_BELARUSIAN = "by"
LANG_BULGARIAN = "bg"
LANG_CATALAN = "ca"
LANG_CHINESE = "za"
LANG_CROATIAN = "hr"
LANG_CZECH = "cs"
LANG_DANISH = "da"
LANG_DUTCH = "nl"
LANG_ESTONIAN = "et"
LANG_FINNISH = "fi"
LANG_FRENCH = "fr"
LANG_GERMAN = "de"
LANG_GREEK = "el"
LANG_HEBREW = "iw"
LANG_HINDI = "hi"
LANG_HUNGARIAN = "hu"
LANG_IRISH = "ga"
LANG_ITALIAN = "it"
LANG_ICELANDIC = "is"
LANG_JAPANESE = "ja"
LANG_KOREAN = "ko"
LANG_LATVIAN = "lv"
LANG_LITHUANIAN = "lt"
LANG_MACEDONIAN = "mk"
LANG_MALAY = "ms"
LANG_MALTESE = "mt"
LANG_NORWEGIAN = "no"
LANG_NORWEGIAN_BOKMAL = "nb"
LANG_NORWEGIAN_NYNORSK = "nn"
LANG_POLISH = "pl"
LANG_PORTUGUESE = "pt"
LANG_ROMANIAN = "ro"
LANG_RUSSIAN = "ru"
LANG_SERBIAN = "sr"
LANG_SLOVAK = "sk"
LANG_SLOVENIAN = "sl"
LANG_SPANISH = "es"
LANG_SWEDISH = "sv"
LANG_THAI = "th"
LANG_TURKISH = "tr"
LANG_UKRAINIAN = "uk"
LANG_VIETNAMESE = "vi"


@dataclass(frozen=True)
class ErrorCode:
    """A service error code with its human-readable description."""

    code: str
    description: str

    def __str__(self) -> str:
        return f"ErrorCode{{code='{self.code}', description='{self.description}'}}"


GENERAL_ERROR_CACHE = ErrorCode("CacheErrorCode", "CacheErrorCode")

# General
GENERAL_CODE_SYSTEM = ErrorCode("IST-MVC", "IST-MVC System")
GENERAL_SUCCESS = ErrorCode("00", "Success")
GENERAL_ERROR = ErrorCode("0019", "General error occurred")

# Client request errors
INVALID_REQUEST = ErrorCode("4000", "Invalid request parameters")
NOT_FOUND_REQUEST = ErrorCode("4040", "Requested data not found")
UNAUTHORIZED_REQUEST = ErrorCode("4010", "Unauthorized access")
FORBIDDEN_REQUEST = ErrorCode("4030", "Access forbidden")
INVALID_PARAMETER = ErrorCode("4002", "Invalid parameter value")
INVALID_FORMAT = ErrorCode("4003", "Invalid format")

# Server errors
SERVER_INTERNAL_ERROR = ErrorCode("5000", "Internal server error")
SERVICE_UNAVAILABLE = ErrorCode("5030", "Server unavailable error")
SERVER_GATEWAY_TIMEOUT = ErrorCode("5040", "Internal server error")

# Database / data errors: 6000-6999
DATA_ERROR = ErrorCode("6000", "General Data Error")
DATA_PARAMETER_INVALID = ErrorCode("6010", "Invalid Data Parameter")
DATA_DUPLICATE = ErrorCode("6020", "Data Error due to duplicate")
DATA_NOT_FOUND = ErrorCode("6040", "Data not found / no records")
DATA_EMPTY = ErrorCode("6041", "Data is empty")
DATA_CONFLICT = ErrorCode("6099", "Data Conflict")

# Communication errors: 8000-8999
COMMUNICATION_ERROR = ErrorCode("8000", "Communication / Network error")
CONNECTION_ERROR = ErrorCode("8001", "Connection Read")
CONNECTION_REFUSED = ErrorCode("8002", "Connection refused")
CONNECT_TIMEOUT = ErrorCode("8003", "Connect Timeout occurred")
READ_TIMEOUT = ErrorCode("8004", "Read Timeout occurred")
API_ERROR = ErrorCode("8010", "API call error")