import copy
import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Optional

from config import DATA_FILE

logger = logging.getLogger(__name__)


class CarStore(ABC):
    """Whole-list storage for car records."""

    @abstractmethod
    def read_all(self) -> list:
        pass

    @abstractmethod
    def write_all(self, cars: list) -> None:
        pass


class JsonFileCarStore(CarStore):
    """Keeps every car in a single JSON array on disk.

    The file is read on every call, there is no cache. A missing or unreadable
    file reads as an empty list instead of raising.
    """

    def __init__(self, path: str):
        self.path = path

    def read_all(self) -> list:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug(f"Car store {self.path} does not exist yet, treating as empty")
            return []
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read car store {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Car store {self.path} does not hold a JSON array, treating as empty")
            return []
        return data

    def write_all(self, cars: list) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(cars, f, indent=4, ensure_ascii=False)


class InMemoryCarStore(CarStore):
    def __init__(self, cars: Optional[list] = None):
        self._cars = copy.deepcopy(cars or [])

    def read_all(self) -> list:
        return copy.deepcopy(self._cars)

    def write_all(self, cars: list) -> None:
        self._cars = copy.deepcopy(cars)


car_store = JsonFileCarStore(DATA_FILE)


def get_car_store() -> CarStore:
    return car_store
