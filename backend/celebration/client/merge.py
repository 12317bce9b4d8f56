from typing import Any


def merge_by_id(local: list[dict[str, Any]], remote: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Union two record lists by ``id``, keeping the local copy on a clash.

    Local ids are client timestamps and remote ids are server sequence
    numbers, so an id match across sources is not necessarily the same record.
    """
    seen = {record.get("id") for record in local}
    merged = list(local)
    for record in remote:
        if not isinstance(record, dict) or record.get("id") in seen:
            continue
        seen.add(record.get("id"))
        merged.append(record)
    return merged
