import re
from collections.abc import Iterator

from motash.domain.ports.scheduler_port import FolderView


class FolderWalker:
    """Selects the scheduler folders an audit looks into.

    Only the first level below a folder is filtered: once a subfolder's name
    matches the pattern, all of its descendants are included. An empty
    pattern matches every folder. The root folder itself is never yielded;
    whether its own tasks are checked is up to the caller.
    """

    def walk(self, root: FolderView, pattern: str = "") -> Iterator[FolderView]:
        matcher = re.compile(pattern, re.IGNORECASE) if pattern else None

        for subfolder in root.subfolders:
            if matcher is not None and not matcher.search(subfolder.name):
                continue

            yield subfolder
            yield from self.walk(subfolder, "")
