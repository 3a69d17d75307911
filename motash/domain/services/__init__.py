from motash.domain.services.failure_formatter import failures_as_text, format_failure
from motash.domain.services.folder_walker import FolderWalker
from motash.domain.services.result_code_parser import ResultCodeParser
from motash.domain.services.task_evaluator import TaskEvaluator

__all__ = [
    "FolderWalker",
    "ResultCodeParser",
    "TaskEvaluator",
    "failures_as_text",
    "format_failure",
]
