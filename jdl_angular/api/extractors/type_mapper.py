"""Type mapping from JDL field types to TypeScript types."""

TS_TYPE_MAP = {
    # text and identifiers
    "String": "string",
    "TextBlob": "string",
    "UUID": "string",
    # numbers
    "Integer": "number",
    "Long": "number",
    "BigDecimal": "number",
    "Float": "number",
    "Double": "number",
    "Boolean": "boolean",
    # dates
    "LocalDate": "dayjs.Dayjs",
    "Instant": "dayjs.Dayjs",
    "ZonedDateTime": "dayjs.Dayjs",
    # binary content travels base64 encoded
    "Blob": "string",
    "AnyBlob": "string",
    "ImageBlob": "string",
}

DATE_TS_TYPE = "dayjs.Dayjs"


def map_to_ts_type(jdl_type: str) -> str:
    """
    Map a JDL type to its TypeScript type.

    Anything not in the table (enums, custom types) is returned unchanged
    and ends up as a nominal type reference in the generated code.
    """
    return TS_TYPE_MAP.get(jdl_type, jdl_type)


def is_date_type(jdl_type: str) -> bool:
    return TS_TYPE_MAP.get(jdl_type) == DATE_TS_TYPE
