"""Configuration classes for graphwalk components."""

from dataclasses import dataclass


@dataclass
class PathEnumerationConfig:
    """Configuration for the background simple-path producer."""

    # Number of completed paths the producer may buffer ahead of the consumer
    queue_size: int = 1

    # Seconds the producer blocks on a full queue before re-checking cancellation
    poll_interval: float = 0.05

    # Seconds close() waits for the producer thread to exit
    join_timeout: float = 1.0

    # Name given to producer threads
    thread_name: str = "graphwalk-paths"

    def __post_init__(self) -> None:
        if self.queue_size < 1:
            raise ValueError(f"queue_size must be >= 1, got {self.queue_size}")
        if self.poll_interval <= 0:
            raise ValueError(
                f"poll_interval must be positive, got {self.poll_interval}"
            )
        if self.join_timeout <= 0:
            raise ValueError(f"join_timeout must be positive, got {self.join_timeout}")


# Global configuration instance
ENUMERATION_CONFIG = PathEnumerationConfig()
