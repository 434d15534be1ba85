"""Static datasets behind the story.

    datasources/
    ├── loader.py        # load_text / load_json from a path or URL, DataLoadError
    ├── climate/         # ONI, SST and elevation text parsers
    └── ebird/           # GeoJSON observation parsing + monthly partition layout

Adding a new dataset
--------------------
1. Put its relative path in the package's ``client.py``.
2. Write a pure parser ``parse_something(text) -> list[...]`` and test it
   against an inline sample in ``tests/test_{name}.py``.
3. Load it through ``DataStore.read_text`` / ``read_json`` in
   ``flows/build.py`` and hand the parsed result to ``analysis/``.
"""
