from typing import Iterable, List

def csv_to_list(v: str | Iterable[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, str):
        return [s.strip() for s in v.split(",") if s.strip()]
    return [str(s).strip() for s in v if s and str(s).strip()]
