from typing import Any, Dict, List, Optional


def normalize_category(record: Any) -> Optional[Dict[str, Any]]:
    """Fill in the fields a thumbnailed category record may be missing.

    Returns None for records in any other shape (e.g. a flat list of videos),
    which are left untouched.
    """
    if not isinstance(record, dict):
        return None
    if not isinstance(record.setdefault("videos", []), list):
        return None
    record.setdefault("categoryThumbnail", "")
    return record


def build_video(
    title: str,
    url: str,
    description: Optional[str] = None,
    thumbnail: Optional[str] = None,
) -> Dict[str, Any]:
    video: Dict[str, Any] = {"title": title, "description": description or "", "url": url}
    if thumbnail:
        video["thumbnail"] = thumbnail
    return video


def category_summaries(catalog: Dict[str, Any]) -> List[Dict[str, str]]:
    summaries = []
    for name, record in catalog.items():
        thumbnail = record.get("categoryThumbnail") if isinstance(record, dict) else None
        summaries.append({"name": name, "categoryThumbnail": thumbnail or ""})
    return summaries


def category_names(catalog: Dict[str, Any]) -> List[str]:
    return list(catalog.keys())
