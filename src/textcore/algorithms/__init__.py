"""
Text algorithms для textcore

Чистые функции над текстом: классификация, сканирование, сравнение,
строгий разбор, переформатирование, извлечение подстрок, кодеки
(percent-encoding, JSON / XML / C++ escapes) и валидаторы форматов.
"""

# Classification (ASCII классы, RFC 3986)
from textcore.algorithms.classification import (
    # Constants
    ASCII_MAX,
    URI_GEN_DELIMS,
    URI_SUB_DELIMS,
    URI_UNRESERVED_MARKS,
    WHITESPACE_CHARS,
    # Code unit predicates
    is_alpha,
    is_alphanumeric,
    is_digit,
    is_hex_digit,
    is_uri_reserved,
    is_uri_unreserved,
    is_whitespace,
    # Folding
    lower_ascii,
    to_lower_ascii,
    to_upper_ascii,
    upper_ascii,
    # Text predicates
    is_all_digits,
    is_null_or_whitespace,
    is_uri_reserved_text,
    is_uri_unreserved_text,
)

# Scanning (predicate-driven primitives)
from textcore.algorithms.scanning import (
    NOT_FOUND,
    CharPredicate,
    TrimSide,
    collapse_whitespace,
    count_if,
    find_if,
    find_if_not,
    remove_if,
    remove_whitespace,
    replace_if,
    trim,
    trim_end,
    trim_end_while,
    trim_start,
    trim_start_while,
    trim_while,
)

# Ordering (case-insensitive / natural)
from textcore.algorithms.ordering import (
    common_prefix,
    common_suffix,
    compare_ignore_case,
    contains_ignore_case,
    ends_with_ignore_case,
    equals_ignore_case,
    ignore_case_key,
    natural_compare,
    natural_key,
    natural_sorted,
    starts_with_ignore_case,
)

# Parsing (strict text → value)
from textcore.algorithms.parsing import (
    BOOL_FALSE_TOKEN,
    BOOL_TRUE_TOKEN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    UINT32_MAX,
    UINT64_MAX,
    ParseResult,
    StrictParseError,
    ValueKind,
    from_string,
    try_from_string,
)

# Reflow (truncate / wrap / indent)
from textcore.algorithms.reflow import (
    DEFAULT_ELLIPSIS,
    DEFAULT_FILL_CHAR,
    center,
    dedent,
    indent,
    pad_left,
    pad_right,
    repeat,
    truncate,
    word_wrap,
)

# Encoding (RFC 3986 percent-encoding)
from textcore.algorithms.encoding import (
    MalformedEscapeError,
    url_decode,
    url_encode,
)

# Escaping (JSON / XML / C++ string literals)
from textcore.algorithms.escaping import (
    cpp_escape,
    cpp_unescape,
    json_escape,
    json_unescape,
    xml_escape,
    xml_unescape,
)

# Extraction (substring by delimiter)
from textcore.algorithms.extraction import (
    count_occurrences,
    extract_between,
    remove_prefix,
    remove_suffix,
    substring_after,
    substring_after_last,
    substring_before,
    substring_before_last,
)

# Network (IP / hostname / endpoint validation)
from textcore.algorithms.network import (
    Endpoint,
    is_domain_name,
    is_hostname,
    is_ipv4_address,
    is_ipv6_address,
    is_port_number,
    try_parse_endpoint,
)

# Formats (date-time, email, UUID, URI, JSON pointer)
from textcore.algorithms.formats import (
    is_date,
    is_date_time,
    is_duration,
    is_email,
    is_json_pointer,
    is_relative_json_pointer,
    is_time,
    is_uri,
    is_uri_reference,
    is_uri_template,
    is_uuid,
)

__all__ = [
    # Classification — Constants
    "ASCII_MAX",
    "URI_GEN_DELIMS",
    "URI_SUB_DELIMS",
    "URI_UNRESERVED_MARKS",
    "WHITESPACE_CHARS",
    # Classification — Code unit predicates
    "is_alpha",
    "is_alphanumeric",
    "is_digit",
    "is_hex_digit",
    "is_uri_reserved",
    "is_uri_unreserved",
    "is_whitespace",
    # Classification — Folding
    "lower_ascii",
    "to_lower_ascii",
    "to_upper_ascii",
    "upper_ascii",
    # Classification — Text predicates
    "is_all_digits",
    "is_null_or_whitespace",
    "is_uri_reserved_text",
    "is_uri_unreserved_text",
    # Scanning — Constants & Types
    "NOT_FOUND",
    "CharPredicate",
    "TrimSide",
    # Scanning — Functions
    "collapse_whitespace",
    "count_if",
    "find_if",
    "find_if_not",
    "remove_if",
    "remove_whitespace",
    "replace_if",
    "trim",
    "trim_end",
    "trim_end_while",
    "trim_start",
    "trim_start_while",
    "trim_while",
    # Ordering — Functions
    "common_prefix",
    "common_suffix",
    "compare_ignore_case",
    "contains_ignore_case",
    "ends_with_ignore_case",
    "equals_ignore_case",
    "ignore_case_key",
    "natural_compare",
    "natural_key",
    "natural_sorted",
    "starts_with_ignore_case",
    # Parsing — Constants
    "BOOL_FALSE_TOKEN",
    "BOOL_TRUE_TOKEN",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "UINT32_MAX",
    "UINT64_MAX",
    # Parsing — Types & Exceptions
    "ParseResult",
    "StrictParseError",
    "ValueKind",
    # Parsing — Functions
    "from_string",
    "try_from_string",
    # Reflow — Constants
    "DEFAULT_ELLIPSIS",
    "DEFAULT_FILL_CHAR",
    # Reflow — Functions
    "center",
    "dedent",
    "indent",
    "pad_left",
    "pad_right",
    "repeat",
    "truncate",
    "word_wrap",
    # Encoding
    "MalformedEscapeError",
    "url_decode",
    "url_encode",
    # Escaping
    "cpp_escape",
    "cpp_unescape",
    "json_escape",
    "json_unescape",
    "xml_escape",
    "xml_unescape",
    # Extraction
    "count_occurrences",
    "extract_between",
    "remove_prefix",
    "remove_suffix",
    "substring_after",
    "substring_after_last",
    "substring_before",
    "substring_before_last",
    # Network — Types
    "Endpoint",
    # Network — Functions
    "is_domain_name",
    "is_hostname",
    "is_ipv4_address",
    "is_ipv6_address",
    "is_port_number",
    "try_parse_endpoint",
    # Formats
    "is_date",
    "is_date_time",
    "is_duration",
    "is_email",
    "is_json_pointer",
    "is_relative_json_pointer",
    "is_time",
    "is_uri",
    "is_uri_reference",
    "is_uri_template",
    "is_uuid",
]
