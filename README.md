# daizen

A static site generator. It walks a source directory, splits front matter
from each file, renders Markdown to HTML, lays pages out through theme
layouts and writes the result to a public directory. Files whose
modification time has not changed can be taken from a build cache.

## Installation

```
pip install .
```

## Site layout

Put a configuration file in the working directory. The first one found
of these is used, both for the site and for the theme configuration:

- `_cfg.yml`
- `_cfg.yaml`
- `_cfg.json`
- `_cfg.toml`

If none exists, `daizen generate` reports that it can't find the site
config file.

Sources live in `source/` (or the directory named by `source_dir`);
output goes to `public/` (or the directory named by `public_dir`). The
output path keeps the source's relative path; the extension becomes the
one a registered renderer produces (`.md` becomes `.html`), otherwise it
is kept.

A page with front matter looks like this:

```
---
title: Hello
layout: post
---
Some *Markdown* text.
```

The opening marker chooses the format: `---` for YAML, `+++` for TOML
and `;;;` for JSON. In every format the block ends at a line starting
with `---`. A file that starts with `{` has its leading brace block
checked as JSON; invalid JSON there is reported as an error.

Pages without `layout` get the `page` layout; missing `title` and
`author` default to empty strings. Files without front matter are
copied, or rendered, straight to their destination.

Markdown is rendered with tables, strikethrough, hard line breaks,
XHTML-style tags and generated heading ids; raw HTML in Markdown is not
passed through.

## Commands

```
daizen generate          # build the site (alias: daizen g)
daizen install NAME      # add a plugin and rebuild the launcher (alias: daizen i)
daizen uninstall NAME    # remove a plugin and rebuild the launcher (alias: daizen uni)
daizen list              # list plugins (alias: daizen l)
daizen rebuild           # rebuild the launcher
daizen reset             # rebuild the launcher without going through an existing one
```

Plugins are Python modules, named by their dotted import path. `rebuild`
writes a launcher script to `.daizen/Daizen` (`.daizen/Daizen.exe` on
Windows) that imports each plugin and then runs the commands. When that
launcher exists, `daizen` hands every command except `reset` to it.

Messages are written to standard error with a coloured label
(`Info`, `Success`, `Error`, ...).

## Build cache

`daizen generate` reads `.daizen/.cache` if it exists. The cache is
written back only when the site has more than 500 and fewer than 5000
pages.

## Using it as a library

- `daizen.site.load_config(directory)` loads the site configuration, the
  cache and the theme configuration, and returns `daizen.site.SITE`.
- `daizen.generator.render_site(site_info)` builds the site and returns
  the rendered pages.
- Themes register layouts with `daizen.theme.register_layout(name, func)`,
  where `func(site_info, page)` returns the page's HTML, and an outer
  wrapper with `daizen.theme.register_root_layout(func)`, where
  `func(site_info, page, body)` returns the final document.
- Renderers subclass `daizen.renderers.Renderer` and are registered by
  source and destination extension with
  `daizen.renderers.register_renderer`; `daizen.renderers.render_text`
  picks the one that matches and raises `RenderError` when none does and
  the extensions differ.
- `daizen.model.Config` is a `dict` with dotted-path lookups
  (`lookup`, `get_string`, `get_int`, `get_list`, `get_bool`).

## What it does not do

There is no development server and no watch mode: pages are built once
per `daizen generate`. Installing a plugin does not download it; the
module must already be importable.

## Tests

```
pip install ".[test]"
pytest
```