"""Look Angles: Streamlit app for antenna pointing angles to geostationary satellites."""

import datetime
import html

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from lookangles.catalog import CatalogError, SatelliteCatalog  # noqa: E402
from lookangles.config import Settings  # noqa: E402
from lookangles.events import LOCATION_CHANGED, SATELLITES_UPDATED, EventBus  # noqa: E402
from lookangles.geocode import GeocodingError, search_location  # noqa: E402
from lookangles.i18n import t  # noqa: E402
from lookangles.locations import (  # noqa: E402
    DEFAULT_LOCATIONS,
    aors_in_country,
    countries_in_aor,
    filter_locations,
)
from lookangles.logger import setup_logger  # noqa: E402
from lookangles.models import GeoPoint  # noqa: E402
from lookangles.renderers.map_plotly import render_pointing_map  # noqa: E402
from lookangles.renderers.plotly_polar import render_polar_chart  # noqa: E402
from lookangles.renderers.polar_svg import render_polar_svg  # noqa: E402
from lookangles.storage import StateStore, StorageError  # noqa: E402
from lookangles.table import (  # noqa: E402
    TableError,
    build_table,
    export_csv,
    export_filename,
    sort_table,
)

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# The first run gets None; the rerun triggered by streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="📡",
    layout="wide",
)

# --- Session state initialization ---
# Catalog, bus and store live for the whole browser session; the bus wires
# catalog/location changes into the state file.
if "store" not in st.session_state:
    _settings = Settings.from_env()
    _logger = setup_logger(level=_settings.log_level)
    _store = StateStore(_settings.state_path)
    _bus = EventBus()
    _catalog = SatelliteCatalog(bus=_bus)
    _catalog.merge_custom(_store.load_custom_satellites())

    def _persist_satellites(satellites):
        try:
            _store.save_custom_satellites(satellites)
        except StorageError as e:
            _logger.error("%s", e)

    def _persist_location(payload):
        try:
            _store.save_last_location(payload["point"], payload["label"])
        except StorageError as e:
            _logger.error("%s", e)

    _bus.subscribe(SATELLITES_UPDATED, _persist_satellites)
    _bus.subscribe(LOCATION_CHANGED, _persist_location)

    st.session_state.settings = _settings
    st.session_state.store = _store
    st.session_state.bus = _bus
    st.session_state.catalog = _catalog
    _restored = _store.load_last_location()
    st.session_state.observer = _restored[0] if _restored else None
    st.session_state.observer_label = _restored[1] if _restored else ""
    _sort_column, _sort_direction = _store.load_sort_state()
    st.session_state.sort_column = _sort_column
    st.session_state.sort_direction = _sort_direction
if "flash" not in st.session_state:
    st.session_state.flash = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

store: StateStore = st.session_state.store
bus: EventBus = st.session_state.bus
catalog: SatelliteCatalog = st.session_state.catalog


def go_to_location(point: GeoPoint, label: str) -> None:
    st.session_state.observer = point
    st.session_state.observer_label = label
    bus.publish(LOCATION_CHANGED, {"point": point, "label": label})


st.title(t("page_title", _lang))

# --- Sidebar: observer location ---
with st.sidebar:
    st.header(t("section_location", _lang))
    _all = t("option_all", _lang)
    # Each filter narrows the other; the country picked on the previous run
    # limits the AOR choices.
    _prev_country = st.session_state.get("country_filter", _all)
    _prev_country = "" if _prev_country == _all else _prev_country
    aor = st.selectbox(
        t("label_aor", _lang),
        [_all] + aors_in_country(DEFAULT_LOCATIONS, _prev_country),
        key="aor_filter",
    )
    aor = "" if aor == _all else aor
    country = st.selectbox(
        t("label_country", _lang),
        [_all] + countries_in_aor(DEFAULT_LOCATIONS, aor),
        key="country_filter",
    )
    country = "" if country == _all else country
    sites = filter_locations(DEFAULT_LOCATIONS, aor=aor, country=country)
    site_names = [s.name for s in sites]
    site_name = st.selectbox(t("label_site", _lang), site_names) if site_names else None
    if site_name and st.button(t("btn_go", _lang), key="go_site"):
        site = next(s for s in sites if s.name == site_name)
        go_to_location(site.point, site.name)
        st.rerun()

    st.divider()
    query = st.text_input(t("label_search", _lang))
    if st.button(t("btn_search", _lang), key="search_btn") and query:
        try:
            found = search_location(query, st.session_state.settings)
        except GeocodingError as e:
            st.session_state.error_msg = t("error_geocode", _lang).format(
                error=html.escape(str(e))
            )
        else:
            st.session_state.flash = t("msg_found", _lang).format(name=found.name)
            go_to_location(found.point, found.name)
        st.rerun()

    st.divider()
    _current: GeoPoint | None = st.session_state.observer
    lat = st.number_input(
        t("label_lat", _lang),
        min_value=-90.0,
        max_value=90.0,
        value=_current.latitude if _current else 35.1796,
        format="%.4f",
    )
    lon = st.number_input(
        t("label_lon", _lang),
        min_value=-180.0,
        max_value=180.0,
        value=_current.longitude if _current else 129.0756,
        format="%.4f",
    )
    if st.button(t("btn_go", _lang), key="go_coords"):
        go_to_location(GeoPoint(latitude=lat, longitude=lon), f"{lat:.4f}, {lon:.4f}")
        st.rerun()

    # --- Sidebar: custom satellites ---
    st.header(t("section_satellites", _lang))
    new_name = st.text_input(t("label_sat_name", _lang))
    new_lon = st.number_input(
        t("label_sat_lon", _lang), min_value=-180.0, max_value=180.0, value=0.0
    )
    if st.button(t("btn_add_sat", _lang), key="add_sat"):
        try:
            sat = catalog.add(new_name, new_lon)
        except CatalogError as e:
            st.session_state.error_msg = str(e)
        else:
            st.session_state.flash = t("msg_added", _lang).format(name=sat.name)
        st.rerun()
    for sat in catalog.custom():
        c1, c2 = st.columns([3, 1])
        c1.write(f"{sat.name} ({sat.longitude:.1f}°)")
        if c2.button(t("btn_delete_sat", _lang), key=f"del_{sat.name}"):
            catalog.remove(sat.name)
            st.session_state.flash = t("msg_deleted", _lang).format(name=sat.name)
            st.rerun()

# --- Messages ---
if st.session_state.error_msg:
    st.error(st.session_state.error_msg)
    st.session_state.error_msg = None
if st.session_state.flash:
    st.success(st.session_state.flash)
    st.session_state.flash = None

observer: GeoPoint | None = st.session_state.observer
if observer is None:
    st.info(t("placeholder", _lang))
    st.stop()

label = st.session_state.observer_label
st.caption(f"📍 {label or f'{observer.latitude:.4f}, {observer.longitude:.4f}'}")
points = catalog.look_angles(observer)

tab_table, tab_polar, tab_map = st.tabs(
    [t("tab_table", _lang), t("tab_polar", _lang), t("tab_map", _lang)]
)

with tab_table:
    df = build_table(observer, catalog.all())
    _columns = ["none", "satellite", "longitude", "elevation", "azimuth"]
    _saved_col = st.session_state.sort_column or "none"
    c1, c2 = st.columns(2)
    sort_col = c1.selectbox(
        t("label_sort", _lang),
        _columns,
        index=_columns.index(_saved_col) if _saved_col in _columns else 0,
    )
    sort_dir = c2.radio(
        " ",
        ["asc", "desc"],
        horizontal=True,
        index=1 if st.session_state.sort_direction == "desc" else 0,
    )
    column = None if sort_col == "none" else sort_col
    direction = "none" if column is None else sort_dir
    if (column, direction) != (st.session_state.sort_column, st.session_state.sort_direction):
        st.session_state.sort_column = column
        st.session_state.sort_direction = direction
        try:
            store.save_sort_state(column, direction)
        except StorageError as e:
            st.warning(str(e))
    st.dataframe(sort_table(df, column, direction), hide_index=True, use_container_width=True)
    try:
        st.download_button(
            t("btn_export", _lang),
            data=export_csv(df),
            file_name=export_filename(label, datetime.date.today()),
            mime="text/csv",
        )
    except TableError as e:
        st.warning(str(e))

with tab_polar:
    c1, c2 = st.columns(2)
    with c1:
        st.plotly_chart(render_polar_chart(points), use_container_width=True)
    with c2:
        components.html(render_polar_svg(points), height=420)

with tab_map:
    st.plotly_chart(render_pointing_map(observer, points, label), use_container_width=True)
    st.caption(t("coverage_note", _lang))
