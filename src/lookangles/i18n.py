"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "안테나 지향각",
        "en": "Antenna Pointing Angles",
    },
    "section_location": {
        "ko": "관측 위치",
        "en": "Observer Location",
    },
    "label_aor": {
        "ko": "작전 구역",
        "en": "AOR",
    },
    "label_country": {
        "ko": "국가",
        "en": "Country",
    },
    "label_site": {
        "ko": "기지",
        "en": "Site",
    },
    "label_search": {
        "ko": "장소 검색",
        "en": "Search for location",
    },
    "label_lat": {
        "ko": "위도",
        "en": "Latitude",
    },
    "label_lon": {
        "ko": "경도",
        "en": "Longitude",
    },
    "option_all": {
        "ko": "전체",
        "en": "All",
    },
    "btn_search": {
        "ko": "검색",
        "en": "Search",
    },
    "btn_go": {
        "ko": "이동",
        "en": "Go",
    },
    "section_satellites": {
        "ko": "위성",
        "en": "Satellites",
    },
    "label_sat_name": {
        "ko": "위성 이름",
        "en": "Satellite name",
    },
    "label_sat_lon": {
        "ko": "궤도 경도",
        "en": "Orbital longitude",
    },
    "btn_add_sat": {
        "ko": "위성 추가",
        "en": "Add satellite",
    },
    "btn_delete_sat": {
        "ko": "삭제",
        "en": "Delete",
    },
    "label_sort": {
        "ko": "정렬",
        "en": "Sort by",
    },
    "btn_export": {
        "ko": "CSV 내보내기",
        "en": "Export CSV",
    },
    "tab_table": {
        "ko": "지향각 표",
        "en": "APA Table",
    },
    "tab_polar": {
        "ko": "극좌표",
        "en": "Polar Plot",
    },
    "tab_map": {
        "ko": "지도",
        "en": "Map",
    },
    "placeholder": {
        "ko": "기지를 고르거나 장소를 검색하세요",
        "en": "Pick a site or search for a location",
    },
    "msg_added": {
        "ko": "위성 \"{name}\"을(를) 추가했어요.",
        "en": "Satellite \"{name}\" added successfully.",
    },
    "msg_deleted": {
        "ko": "위성 \"{name}\"을(를) 삭제했어요.",
        "en": "Satellite \"{name}\" deleted.",
    },
    "msg_found": {
        "ko": "위치를 찾았어요: {name}",
        "en": "Location found: {name}",
    },
    "error_geocode": {
        "ko": "장소를 찾을 수 없어요. ({error})",
        "en": "Location not found. ({error})",
    },
    "coverage_note": {
        "ko": "커버리지 원은 표시용 근사치이며 실제 빔 풋프린트가 아니에요.",
        "en": "Coverage circles are illustrative only, not beam footprints.",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
