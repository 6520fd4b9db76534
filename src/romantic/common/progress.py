"""Progress reporting for batch conversions.

Prints a single, in-place updating progress line so long CSV conversions
give feedback on the console without scrolling.
"""


class ProgressPrinter:
    """Simple progress printer for console output.

    Attributes:
        task_name: Description of the task being performed
        total: Total number of items to process

    Example:
        >>> progress = ProgressPrinter("Converting rows", 3)
        >>> for i in range(3):
        ...     progress.update(i + 1)
        >>> progress.done()
        Converting rows...Done!
    """

    def __init__(self, task_name: str, total: int):
        self.task_name = task_name
        self.total = total

    def update(self, current: int) -> None:
        """Show "Task...current/total" on the current line (current is 1-based)."""
        print(f"{self.task_name}...{current}/{self.total}", end='\r', flush=True)

    def done(self) -> None:
        print(f"{self.task_name}...Done!    ")  # Extra spaces clear any remaining digits
