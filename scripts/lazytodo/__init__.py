"""
lazytodo - terminal todo manager.

Architecture:
- providers.py: data model, repository protocol, render-model snapshots
- editor.py / selection.py / modal.py: input and list primitives
- stores.py: in-memory task and workspace stores, flushed on every change
- file_store.py: JSON file repository under the app directory
- controller.py: key dispatch state machine
- views/: Textual screen/widget components (display surface)
- app.py: main application entry point

Extensibility points:
1. New storage: implement the Repository protocol
2. New tabs: add to Tab, register a handler in AppController
3. New widgets: create passive widgets in views/widgets.py
"""
