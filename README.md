# genco

Building blocks for a code generator. The package does four main jobs:

- It reads Avro schema files and writes them out as OpenAPI component schemas in YAML.
- It builds parse trees for JSON documents, with byte offsets.
- It applies byte-range edits to files.
- It keeps a small SQLite index of Java import routes.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Translating Avro to OpenAPI

```python
from pathlib import Path

from genco.avro_parser import parse
from genco.openapi_from_avro import avro_to_openapi_str

items = parse(Path("schemas/enum.avsc"))
print(avro_to_openapi_str(items))
```

`genco.avro_parser.parse` returns the outermost Avro objects in the file as a list of `AvroItem` values. Each item has these fields:

- `name`
- `namespace`
- `doc`
- `item_type`
- `symbols`
- `default`
- `fields`

An `AvroItemType` pairs an `AvroItemKind` with an optional value. The value is a nested `AvroItem`, a record name, a tuple of union members, or an element type. If a schema is missing a type, or declares an array without `"items"`, the parser raises `AvroParseError`.

`genco.openapi_from_avro.to_component_schema` turns one item into an `OpenapiSchema`, and `to_data_type` turns one Avro type into an `OpenapiDataType`. Calling `str()` on an `OpenapiSchema` gives its YAML text, and `avro_to_openapi_str` joins these texts with blank lines.

Two cases are not translated and raise `TranslationError`:

- Avro items whose type is a nested record carrying more than a bare type.
- Items that lack a name where one is needed.

## JSON parse trees

```python
from pathlib import Path

from genco.json_parser import parse

root = parse(Path("basic.json"))
print(root.tree_str(False))
```

Every node is a `JsonNode` with these attributes:

- `start_byte` and `end_byte`
- `children`
- `node_type`, a `JsonNodeType`

`tree_str(True)` also shows each node's byte range. `depth_first_search_bytes(node_type)` returns the byte range of the first node of a given type. `content()` returns a node's text.

The parser handles objects, arrays, strings (with escape sequences), numbers and `null`. It does not represent `true` or `false`, and raises `JsonParseError` for those and for malformed input.

## Editing files by byte range

```python
from pathlib import Path

from genco.file_overwriter import FileOverwriting

edit = FileOverwriting.from_path(Path("Example.java"))
edit.replace(10, 20, "replacement")
edit.insert_content_with_previous_newline_at(5, "inserted")
edit.append_with_previous_newline("appended")
edit.write_all()
```

Edits are collected and applied together. Call `written_buffer()` to get the result as bytes, `write_all_to_file(path)` to write it elsewhere, or `write_all()` to overwrite the input. `FileOverwritingError` is raised in these cases:

- Overlapping edits.
- Ranges that reach past the end of the file.
- A missing input file passed to `from_path`.

## Java import routes

`genco.java_import_route` stores `JavaImportRouteCreate` records with `save` and looks them up with `by_last_type_id` or `by_base_package_and_route`. Lookups return `JavaImportRouteEntity` values. `to_file_path()` rebuilds the source path `<base_package>/src/main/java/<route>.java`.

Every function accepts a `db_file` path. Without one, the database is `database/test.db` under the current directory. The table is created on first use by `genco.database.get_db_connection`.

`get_import_route("/p", "/p/src/main/java/org/test/A.java")` gives `"org.test.A"`.

## Template variables

`genco.user_input_handler.UserInput.from_file(path)` collects the `#{var=name}#` placeholders of a file, merged by name. It records each placeholder's byte range as a `VariableInstantiation`.

- `add_variables_from` adds more files; a file is read only once.
- `request_missing_user_input` asks for each value on standard input.
- `override_value` fixes a value.

`genco.user_input_function.UserInputFunction.parse("to_medial_case(var)")` describes a named transformation, and `apply` runs it. The available names are:

- `to_medial_case`
- `to_lowercase_with_hyphens`
- `to_lowercase_space_separated`

## Other helpers

- `genco.string_helper`: case conversions, `escape_str_for_json`, `trim_quotation_marks` and `to_str`.
- `genco.semver.SemVer.parse("1.2")`: accepts `major`, `major.minor` or `major.minor.patch`; missing parts are zero.
- `genco.recipe_type.RecipeType.from_str("java")`: the recipe language; only `java` is known.
- `genco.file_editor`: creating, replacing and copying files, with missing parent directories created. Failures raise `FileEditError`.
- `genco.file_reader` and `genco.file_cache.FileCache`: reading whole files or byte ranges.
- `genco.directory_browser` and `genco.file_browser`: listing and finding directories and files.
- `genco.future_handler.wait`: runs an awaitable to completion from synchronous code.
- `genco.cli_query`: prompts on standard input.
- `genco.logger`: prints warnings; `log_unrecoverable_error` raises `UnrecoverableError`.

## What the package does not do

- It has no command-line program. Everything is used as a library.
- It does not read or run recipe files. Only the recipe's version (`SemVer`) and language (`RecipeType`) are modelled.
- It does not parse YAML or Java sources.
- It does not fill template variables back into files.