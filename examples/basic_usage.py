#!/usr/bin/env python3
"""Basic usage example"""

from asyncapi_exporter import create_logger

def main():
    # Root logger; "error" lets info, warn and error through
    logger = create_logger(label="example", level="error")

    # Scoped logger for a subsystem
    db_logger = logger.child(label="db")

    # Log messages
    logger.info("Application started")
    logger.warn("This is warning")
    logger.error("This is error", {"code": 42})
    logger.debug("Hidden until the threshold is debug")
    db_logger.info("Connected")

    # Verbose mode
    logger.set_log_level("debug")
    logger.debug("Now visible")
    db_logger.debug("Still hidden, the child kept its own threshold")

    # Custom sink
    records = []
    captured = logger.child(label="capture", sink=lambda *call: records.append(call))
    captured.info("Goes to the list", 1, 2)
    print(records)

if __name__ == "__main__":
    main()
