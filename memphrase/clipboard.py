# OutputSink
# (clipboard and console output)
#

import pyperclip


class ClipboardError(RuntimeError):

    def __init__(self, msg):
        RuntimeError.__init__(self, msg)


def copy_to_clipboard(text: str):
    """Put `text` on the system clipboard.

    :raises ClipboardError: No usable clipboard mechanism.

    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Unable to copy to clipboard: {e}")


class OutputSink:

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        copy_to_clipboard(text)

    def _print(self, text):
        print(text)

    def emit(self, text: str, quiet: bool = False):
        """Copy `text` to clipboard, then print it unless `quiet`."""
        self._copy(text)
        if not quiet:
            self._print(text)
