import argparse
import sys

from dotenv import load_dotenv

from logging_setup import setup_logging
from storage import TaskIndexError, TaskValidationError, create_task_store

def list_tasks(store):
    """Prints every task with its position."""
    tasks = store.list()
    if not tasks:
        print("No tasks yet.")
        return 0

    for index, task in enumerate(tasks):
        print(f"[{index}] {task}")
    return 0

def add_task(store, text):
    try:
        tasks = store.add(text)
    except TaskValidationError as e:
        print(f"Error: {e}")
        return 1
    print(f"Task added successfully ({len(tasks)} total).")
    return 0

def delete_task(store, index):
    try:
        removed, tasks = store.remove_at(index)
    except TaskIndexError as e:
        print(f"Error: {e}")
        return 1
    print(f"Task deleted successfully: {removed} ({len(tasks)} remaining).")
    return 0

def main(argv=None):
    load_dotenv()
    parser = argparse.ArgumentParser(description="Manage the task list from the command line.")
    parser.add_argument("--file", type=str, default=None, help="Path to the tasks JSON file (defaults to TASKS_FILE or tasks.json).")
    parser.add_argument("--verbose", action='store_true', help="Show storage log messages.")
    subparsers = parser.add_subparsers(dest='command', required=True, help='Available commands')

    subparsers.add_parser('list', help='List all tasks.')

    parser_add = subparsers.add_parser('add', help='Add a task to the end of the list.')
    parser_add.add_argument('text', type=str, help='The task text.')

    parser_delete = subparsers.add_parser('delete', help='Delete the task at a position.')
    parser_delete.add_argument('index', type=str, help='Zero-based position of the task.')

    args = parser.parse_args(argv)
    setup_logging("INFO" if args.verbose else "WARNING")

    store = create_task_store(args.file)

    if args.command == 'list':
        return list_tasks(store)
    elif args.command == 'add':
        return add_task(store, args.text)
    elif args.command == 'delete':
        return delete_task(store, args.index)

if __name__ == "__main__":
    sys.exit(main())
