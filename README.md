# mdstudio

A small desktop studio for Markdown files. It lists the Markdown files found
in the directories you configure. Pick one from the list and it opens in an
editor pane with a configurable toolbar. It also watches the working directory
and refreshes the list when `.md` files are created, removed or renamed into
place.

The window uses Tk through Python's `tkinter`. Some systems ship it as a
separate package.

## Installing

```
pip install .
```

To run the test suite, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Running

```
mdstudio
mdstudio --config path/to/config.json
```

`--config` names the configuration file. The default is `config.json` in the
current working directory.

The window shows the file list on the left and the editor on the right. The
path of the open file appears along the bottom. If a file cannot be read, the
bottom line says `Failed to load: <path>`. Files are read as UTF-8 and any
invalid bytes are replaced.

Toolbar buttons are enabled as follows:

- **Save** is enabled only while the text differs from what was loaded or last
  saved. It writes the text back to the open file.
- **Delete** and **Move** are enabled only while a file is open.
- **New** and **Paste** are always enabled.
- **Undo** and **Redo** become enabled once the editor state first changes,
  for example when a file is opened. They act on the text pane's own undo
  history.
- **Copy** and **Cut** stay disabled, because the selection is not tracked.
  The usual keyboard shortcuts of the text pane still work.

## Configuration

The configuration is a JSON file. If it is missing or cannot be decoded, the
defaults are written to it on start. Keys that are absent keep their default
values. A value of the wrong type makes the whole file count as invalid, and
it is replaced with the defaults. The defaults look like this:

```json
{
  "theme": "system",
  "directories": [
    {"path": ".", "recursive": false}
  ],
  "toolbars": [
    {
      "name": "editorMain",
      "orientation": "horizontal",
      "actions": ["newfile", "separator", "save", "copy", "cut", "paste",
                  "separator", "undo", "redo", "separator",
                  "deletefile", "movefile"]
    }
  ]
}
```

- `theme`: `"dark"` or `"light"` sets the window colours. Any other value
  leaves Tk's own colours unchanged.
- `directories`: the places to look for files ending in `.md`, in any case.
  Files are listed in configuration order, and by name within each directory.
  With `recursive` set to `true`, subdirectories are searched depth-first.
  Symbolic links to directories are not followed. If the list is empty, the
  working directory is added and the configuration is saved.
- `toolbars`: named toolbars and the actions they show, in order. Use
  `"separator"` to put a gap between groups. Unknown action names are skipped.
  An `orientation` of `"vertical"` stacks the buttons; anything else lays them
  out horizontally. The editor uses the toolbar named `editorMain`.

## What it does not do

The **New**, **Delete** and **Move** buttons only log the request. No file is
created, deleted or moved. The watcher covers the working directory only, not
the configured directories, and it does not look into subdirectories.

## Using the pieces from Python

The building blocks can also be used without the window:

```python
from mdstudio.config import load_config, save_config
from mdstudio.scanning import scan_markdown_files, file_names
from mdstudio.eventbus import EventBus

cfg = load_config("config.json")
paths = scan_markdown_files(cfg)
print(file_names(paths))

bus = EventBus()
bus.subscribe("editor.save", lambda payload: print("save requested"))
threads = bus.publish("editor.save", None)
for thread in threads:
    thread.join()

save_config(cfg, "config.json")
```

`EventBus.publish` runs each handler in its own thread and returns the
threads it started.

Other modules:

- `mdstudio.actions`: the toolbar actions (`SaveAction`, `CopyAction` and the
  others), `EditorState`, `ActionContext`, `register_action` and
  `create_action`. `create_action` raises `KeyError` for an unknown name.
- `mdstudio.toolbar`: `build_toolbar(name, cfg, ctx)` returns a `Toolbar`, or
  `None` if no toolbar of that name is configured.
- `mdstudio.editor`: `Editor` holds the text and tracks whether it is dirty.
  `Editor.save()` returns `False` when no file is open and raises `OSError`
  when the write fails.
- `mdstudio.filelist`: `FileList` holds the scanned files and the selection.
- `mdstudio.watcher`: `MarkdownDirWatcher` calls a function once `.md`
  creations or removals have been quiet for half a second. It can be used as a
  context manager. `watch_markdown_dir(directory, on_change)` starts one.
- `mdstudio.app`: `StudioController` ties the pieces together without any
  widgets. `build_main_ui` lays them out in a Tk window, and `main` is the
  `mdstudio` command.

Toolbar actions publish these events on the bus: `editor.save`, `editor.copy`,
`editor.cut`, `editor.paste`, `editor.undo`, `editor.redo`, `app.newfile`,
`app.deletefile` and `app.movefile`.