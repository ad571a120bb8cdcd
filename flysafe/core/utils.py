"""
Shared utilities for the application
"""
import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        # In production, add FileHandler for persistent logs
        # logging.FileHandler('flysafe.log'),
    ]
)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module"""
    return logging.getLogger(f"flysafe.{name}")


def round_distance(distance_km: float, decimals: int = 2) -> float:
    """Round a distance for display and policy comparison"""
    return round(distance_km, decimals)
