"""Result codes with a fixed meaning for the audit."""

# 0x00041301, the scheduler reports this for tasks that are still running
SCHED_S_TASK_RUNNING = 267009

APP_ERROR_ID = -10556
APP_WARNING_ID = -10557

APP_ERROR_NAME = "Application Exception"
APP_WARNING_NAME = "Application Warning"
