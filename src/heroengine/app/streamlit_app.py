"""Minimal Streamlit app: browse the hero table, pick two heroes, compare them."""

from typing import Optional

import streamlit as st

from heroengine.config import config_from_env
from heroengine.core.compare import Comparator
from heroengine.core.render import comparison_to_dict, format_comparison_text
from heroengine.data.errors import AccessorFailure
from heroengine.data.load import load_catalog


def run_app(data_path: Optional[str] = None) -> None:
    """Run Streamlit UI over the catalog at data_path (default: env / packaged data)."""
    cfg = config_from_env()
    path = data_path or cfg.data_path
    st.title("Superheroes")
    st.write("Select 2 superheroes to compare category by category.")

    try:
        catalog = load_catalog(path, cfg)
    except AccessorFailure as e:
        st.error(f"Superhero data unavailable: {e}")
        return

    frame = catalog.to_frame()
    st.dataframe(frame.drop(columns=["image"]), use_container_width=True, hide_index=True)
    if len(catalog) == 0:
        st.warning("The catalog is empty.")
        return

    labels = {e.id: f"{e.name} (#{e.id})" for e in catalog}
    ids = catalog.ids()
    col_a, col_b = st.columns(2)
    id_a = col_a.selectbox("Hero 1", options=ids, format_func=labels.get, index=0)
    id_b = col_b.selectbox("Hero 2", options=ids, format_func=labels.get, index=min(1, len(ids) - 1))

    if st.button("Compare Heroes"):
        result = Comparator(catalog).compare(id_a, id_b)
        a = catalog.lookup(id_a)
        b = catalog.lookup(id_b)
        col_a.image(a.image, caption=a.name)
        col_b.image(b.image, caption=b.name)
        st.subheader("Comparison")
        st.code(format_comparison_text(result, a.name, b.name))
        with st.expander("Raw response"):
            st.json(comparison_to_dict(result))


if __name__ == "__main__":
    run_app()
