# textemboss

A small Python library and command-line tool for extracting text from images
through interchangeable "embossers". An embosser is chosen by a URI whose
scheme selects the implementation:

| Scheme                | Class           | What it does                                                        |
|-----------------------|-----------------|---------------------------------------------------------------------|
| `null://`             | `NullEmbosser`  | Returns an empty result for every image; useful for testing.        |
| `local:///path/bin`   | `LocalEmbosser` | Runs a local text-extraction program and reads its JSON output.     |
| `http://`, `https://` | `HTTPEmbosser`  | Posts the image to the service's `<uri>/json` endpoint.             |

## Installation

```
pip install textemboss
```

## Library usage

```python
from textemboss.emboss import new_embosser, schemes

print(schemes())  # ['http://', 'https://', 'local://', 'null://']

with new_embosser("http://localhost:8080") as embosser:
    result = embosser.emboss_text("menu.jpg")
    print(result)            # the extracted text
    print(result.to_dict())  # {"text": ..., "source": ..., "created": ...}
```

Image data from an open binary file (or any binary reader) can be passed
together with a path:

```python
with open("menu.jpg", "rb") as fh, new_embosser("null://") as embosser:
    result = embosser.emboss_text_with_reader("menu.jpg", fh)
```

Every result is an `EmbossTextResult` dataclass with `text`, `source` and
`created` fields; `str(result)` is the text, and `EmbossTextResult.from_dict`
builds one from a decoded JSON object. Every failure — an unknown scheme, a
missing program, a failed request, an unreadable response — is raised as
`EmbosserError`.

### The embossers

- **`NullEmbosser`** ignores its input and returns an empty result.
- **`LocalEmbosser`** takes the program from the URI's path and checks that it
  exists. For each image it runs `<program> --as-json true <image>` and
  expects a JSON object with `text`, `source` and `created` keys on standard
  output. `emboss_text_with_reader` writes the reader's data to `path` (or to
  a temporary file when `path` is empty), runs the program on it and then
  **deletes that file** — pass a path you do not need to keep.
- **`HTTPEmbosser(uri, session=None)`** posts the image as multipart form data
  (an `image` file part, whose content type is guessed from the file
  extension, plus a `Content-Type` field set to `image/jpeg`) to
  `<uri>/json`. Any status other than 200 is an error. A `requests.Session`
  may be supplied; one created by the embosser is closed by `close()`. The
  helper `image_part_headers(name, filename)` returns the headers used for the
  image part.

### Adding an embosser

Any subclass of `Embosser` can be made available under a scheme:

```python
from textemboss.emboss import Embosser, new_embosser, register_embosser

register_embosser("custom", MyEmbosser)
embosser = new_embosser("custom://")
```

The factory is called with the full URI. Schemes are matched case-insensitively,
and registering a scheme that is already taken raises `EmbosserError`.

## Command line

```
emboss [--embosser-uri URI] [--as-json] IMAGE [IMAGE ...]
```

- `--embosser-uri` selects the embosser (default
  `local:///usr/local/sfomuseum/bin/text-emboss`).
- `--as-json` prints each result as a compact one-line JSON object with
  `text`, `source` and `created` properties instead of plain text.

The options may also be written with a single dash (`-embosser-uri`,
`-as-json`). On the first failure the command prints a message to standard
error and exits with status 1.

Example:

```
emboss --embosser-uri http://localhost:8080 --as-json menu.jpg
```

## What this package does not do

The package does not recognise text itself: it relies on an external program
(`local://`) or an HTTP service (`http://`, `https://`) to do so. There is no
gRPC transport; only the schemes listed above are built in.

## Development

```
pip install -e ".[test]"
pytest
```