"""Shared CSS for TaskTabs components.

Modal dialogs and buttons look the same everywhere, so their styling lives
here and components append their own rules:

    class MyModal(ModalScreen):
        DEFAULT_CSS = MODAL_BASE_CSS + BUTTON_BASE_CSS + '''
        MyModal > Container { width: 60; }
        '''

Colors come from the active Textual theme (see theme.py), never literals.
"""


# Base Modal Styles
# Used by TaskCreationModal, TaskDetailModal and ClearConfirmModal
MODAL_BASE_CSS = """
/* Dimmed overlay behind the dialog */
ModalScreen {
    align: center middle;
    background: $background 60%;
}

/* Dialog box */
ModalScreen > Container {
    background: $surface;
    border: thick $primary;
    padding: 1 2;
    height: auto;
}

ModalScreen .modal-header {
    width: 100%;
    content-align: center middle;
    color: $foreground;
    border-bottom: solid $primary;
    text-style: bold;
    padding: 0 0 1 0;
}

ModalScreen .field-label {
    color: $foreground;
    padding: 1 0 0 0;
}

ModalScreen Input {
    width: 100%;
    border: solid $secondary;
}

ModalScreen Input:focus {
    border: solid $primary;
}

ModalScreen .button-container {
    width: 100%;
    height: 3;
    align: center middle;
    margin-top: 1;
    layout: horizontal;
}
"""


# Base Button Styles
BUTTON_BASE_CSS = """
Button {
    margin: 0 1;
    min-width: 12;
}

/* Save, restore, confirm */
Button.success {
    border: tall $success;
}

/* Delete, purge, cancel */
Button.error {
    border: tall $error;
}
"""
