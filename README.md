# scrivi

The data layer of Scrivi writing projects: typed records for projects,
manuscripts, chapters, scenes, world objects, assets, comments and repair
issues; serialisers and parsers for the JSON files a project keeps on disk;
and the small file and text utilities these rely on.

It needs nothing beyond the Python standard library and supports Python
3.10 and later.

## Installation

```
pip install scrivi
```

To run the tests:

```
pip install "scrivi[test]"
pytest
```

## Modules

- `scrivi.errors`: `ErrorCode`, an integer enum of failure categories, and
  `ScriviError`, the exception raised on failure. It carries `code`,
  `message`, `path` and `detail`.
- `scrivi.jsondoc`: `JsonDoc`, a lenient JSON document. `get_string`,
  `get_bool`, `get_int`, `get_sub_doc` and `array_item` return defaults or an
  empty document when a key is missing or holds the wrong type. The
  `set_*`, `set_sub_doc` and `append_to_array` methods build documents, and
  `array_items` iterates an array. `dump(indent=2)` writes JSON with sorted
  keys; a negative indent gives compact output. `parse_json` raises
  `ScriviError` with `ErrorCode.PARSE_ERROR` on malformed input.
- `scrivi.hashing`: `sha256_hex`, a lowercase hex SHA-256 digest. Text is
  hashed as UTF-8.
- `scrivi.paths`: `join`, `extension`, `replace_extension`, `filename`,
  `parent` and `make_absolute`. They work on `/`-separated strings and are
  purely lexical. `make_absolute` joins and then normalises `.` and `..`.
- `scrivi.slug`: `make_slug`. It drops non-ASCII characters, lowercases, and
  turns runs of other characters into single hyphens, with none at either
  end.
- `scrivi.textstats`: `count_text`, which returns a `TextStats` with
  `word_count` (split on ASCII whitespace) and `character_count` (UTF-8 code
  points). No Markdown syntax is stripped.
- `scrivi.atomic_write`: `atomic_write_text_file`. It writes to a sibling
  `.tmp` file and renames it over the target, raising `ScriviError` with
  `ErrorCode.IO_ERROR` on failure.
- `scrivi.ids`: frozen identifier types such as `ProjectID`, `SceneID` and
  `ObjectID`, each wrapping a `value` string.
- `scrivi.model`, `scrivi.assets`, `scrivi.comments`, `scrivi.objects`,
  `scrivi.repair`: enums and dataclasses that describe a project, for
  example `OpenMode`, `WorkspaceState`, `AssetCategory`, `CommentThread`,
  `CharacterObject` and `RepairIssue`. Helpers map enums to directory and
  wire names: `asset_category_subdir`, `asset_category_string`,
  `asset_category_from_string` and `object_kind_subdir`.
- `scrivi.services`: abstract interfaces for what a host application
  supplies (`Clock`, `UUIDProvider`, `FileSystem`, `SecureStore`,
  `GitProvider`, `Logger`), bundled in `CoreServices`.
- `scrivi.requests` and `scrivi.results`: request and result records for
  project, scene, snapshot, repair, object, asset, comment and inbox
  operations.
- `scrivi.schemas`: serialisers and parsers for the on-disk formats:
  - `project_json` for `scrivi.project.v1`
  - `manuscript_meta_json` for `scrivi.manuscript.v1`
  - `chapter_meta_json` for `scrivi.chapter.v1`
  - `scene_meta_json` for `scrivi.scene.v1`
  - `project_members_json` for `scrivi.projectMembers.v1`
  - `project_personas_json` for `scrivi.projectPersonas.v1`
  - `workspace_state_json` for `scrivi.workspaceState.v1`

  `schema_utils` holds the shared checks.

## Examples

```python
from scrivi.slug import make_slug
from scrivi.textstats import count_text

make_slug("The Long Night, Part 2")          # "the-long-night-part-2"
count_text("It was a dark and stormy night.")
# TextStats(word_count=7, character_count=31)
```

```python
from scrivi.atomic_write import atomic_write_text_file

atomic_write_text_file("scene.md", "# Opening\n\nIt begins.\n")
```

```python
from scrivi.schemas.project_json import ProjectJsonData, parse_project, serialize_project

text = serialize_project(ProjectJsonData(title="Night Train"))
project = parse_project(text)
```

Each parser checks the document's `schema` tag and the format's required
fields. Malformed JSON raises `ScriviError` with `ErrorCode.PARSE_ERROR`. A
wrong schema tag or a missing required field raises it with
`ErrorCode.VALIDATION_ERROR`:

```python
from scrivi.errors import ScriviError
from scrivi.schemas.scene_meta_json import parse_scene_meta

try:
    parse_scene_meta('{"schema": "scrivi.chapter.v1"}')
except ScriviError as exc:
    print(exc.code.name, exc)   # VALIDATION_ERROR unexpected schema: scrivi.chapter.v1
```

In workspace state, the scroll position is stored in thousandths and
truncated to an integer. A round trip keeps three decimal places.

## What this package does not do

This package defines records and file formats only. It does not perform
the operations its request and result records describe: creating or
opening projects, saving scenes, scanning for external changes, applying
repairs, taking snapshots, or managing objects, assets, comments or the
inbox. The service classes in `scrivi.services` are abstract. No file
system, clock, secure store, version-control or logging implementation is
included, and there is no command-line tool.