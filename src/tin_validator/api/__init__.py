from .file import process_file
