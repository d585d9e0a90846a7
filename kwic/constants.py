"""Constants and configuration for the KWIC indexer."""

class KwicConstants:
    """Central configuration constants for the indexer."""

    # Command line
    DEFAULT_INPUT_FILENAME = "input.txt"  # Used when no input is named
    EXIT_FAILURE = 1

    # Input format (raw byte values)
    WORD_SEPARATOR = 0x20  # Space
    LINE_SEPARATOR = 0x0A  # Newline

    # Output format
    OUTPUT_WORD_SEPARATOR = b" "
    OUTPUT_LINE_TERMINATOR = b"\n"

    # I/O
    READ_CHUNK_SIZE = 64 * 1024  # Bytes read from the source per call

    # Diagnostic messages
    READ_ERROR_MESSAGE = "Error reading {}: {}"
    WRITE_ERROR_MESSAGE = "Error writing output: {}"
