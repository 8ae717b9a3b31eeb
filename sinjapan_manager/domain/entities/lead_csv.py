"""Pasted-CSV parser for bulk lead registration.

The format is deliberately naive: lines are split on ``\\n`` and cells on
``,`` with no quoting or escaping support. Header names are matched
case-insensitively against a fixed Japanese/English dictionary.
"""

from ..exceptions import LeadImportError

# header (lower-cased) -> lead field
LEAD_CSV_HEADERS: dict[str, str] = {
    "名前": "name",
    "name": "name",
    "会社": "company",
    "company": "company",
    "電話": "phone",
    "phone": "phone",
    "メール": "email",
    "email": "email",
    "ウェブサイト": "website",
    "website": "website",
    "住所": "address",
    "address": "address",
    "カテゴリ": "category",
    "category": "category",
    "instagram": "instagramUrl",
    "twitter": "twitterUrl",
    "facebook": "facebookUrl",
    "line": "lineId",
    "googleマップ": "googleMapsUrl",
    "googlemaps": "googleMapsUrl",
    "メモ": "notes",
    "notes": "notes",
}

CSV_LEAD_SOURCE = "csv"

MSG_MISSING_ROWS = "CSVデータが不正です。ヘッダー行とデータ行が必要です。"
MSG_NO_VALID_LEADS = "有効なリードデータがありません。"


def parse_lead_csv(text: str) -> list[dict[str, str]]:
    """Turn pasted CSV text into lead payloads (camelCase keys).

    Every row is tagged with ``source="csv"``. Rows whose name is empty
    are dropped.

    Raises:
        LeadImportError: If there is no data row, or no row has a name.
    """
    lines = text.strip().split("\n")
    if len(lines) < 2:
        raise LeadImportError(MSG_MISSING_ROWS)

    headers = [h.strip().lower() for h in lines[0].split(",")]
    leads: list[dict[str, str]] = []

    for line in lines[1:]:
        values = [v.strip() for v in line.split(",")]
        lead: dict[str, str] = {"source": CSV_LEAD_SOURCE}

        for index, header in enumerate(headers):
            field = LEAD_CSV_HEADERS.get(header)
            if field is None:
                continue
            lead[field] = values[index] if index < len(values) else ""

        if lead.get("name"):
            leads.append(lead)

    if not leads:
        raise LeadImportError(MSG_NO_VALID_LEADS)
    return leads
