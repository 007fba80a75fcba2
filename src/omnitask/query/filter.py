# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any, Optional

from omnitask.model.task import TaskStatus


class Predicate(ABC):
    @abstractmethod
    def filter(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]: ...


class And(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def filter(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        result_ids = [item["id"] for item in items]
        for predicate in self.predicates:
            pred_result_ids = {pred_result["id"] for pred_result in predicate.filter(items)}
            result_ids = [id for id in result_ids if id in pred_result_ids]
        return [item for item in items if item["id"] in result_ids]


class Or(Predicate):
    def __init__(self) -> None:
        self.predicates: list[Predicate] = []

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def filter(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        result_ids: set[Any] = set()
        for predicate in self.predicates:
            result_ids |= {pred_result["id"] for pred_result in predicate.filter(items)}
        # Keep the input order and never repeat an item
        return [item for item in items if item["id"] in result_ids]


class Equals(Predicate):
    def __init__(self, property: str, value: str) -> None:
        self.property = property
        self.value = value

    def filter(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [
            item
            for item in items
            if self.property in item
            and item[self.property] is not None
            and str(item[self.property]) == self.value
        ]


class ContainsNoCase(Predicate):
    def __init__(self, property: str, value: str) -> None:
        self.property = property
        self.value = value

    def filter(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [
            item
            for item in items
            if self.property in item
            and item[self.property] is not None
            and self.value.lower() in str(item[self.property]).lower()
        ]


def task_board_filter(
    search: Optional[str] = None, status: Optional[TaskStatus] = None
) -> Predicate:
    """
    Filter used by the task board.

    The search term matches title or description, ignoring case. A status of
    None means every status.
    """
    predicate = And()
    if search:
        text_match = Or()
        text_match.add_predicate(ContainsNoCase("title", search))
        text_match.add_predicate(ContainsNoCase("description", search))
        predicate.add_predicate(text_match)
    if status is not None:
        predicate.add_predicate(Equals("status", str(status)))
    return predicate
