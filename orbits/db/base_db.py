from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence

import astropy.units as u
import numpy as np
import pandas as pd
from astropy.table import QTable, Row
from typing_extensions import Self


class BaseDB(ABC):
    """
    Read-only view over a QTable with one row per entity, keyed by a string id column.

    Filtering methods never modify the wrapped table: they return a new instance of the
    concrete class over the selected rows.
    """

    def __init__(self, dataset: QTable, id_field: str):
        if len(dataset.columns) == 0:
            raise ValueError("Attempting to create a table view with an empty column set.")
        if id_field not in dataset.colnames:
            raise ValueError(f"Id column '{id_field}' is missing, columns are {dataset.colnames}")

        # An empty dataset with columns but no data is a valid dataset
        if len(dataset) != 0:
            dataset.add_index(id_field)

        self._ds = dataset
        self._id_column = id_field

    def __len__(self) -> int:
        return len(self._ds)

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self.ids

    def __iter__(self) -> Iterator[Row]:
        return iter(self._ds)

    @abstractmethod
    def _factory(self, dataset: QTable) -> Self:
        pass

    @property
    def view(self) -> QTable:
        return self._ds

    @property
    def ids(self) -> list[str]:
        return [str(i) for i in self._ds[self._id_column]]

    def get(self, entity_id: str) -> Optional[Row]:
        """Row with the given id, or None if there is none."""
        mask = self._ds[self._id_column] == entity_id
        if not np.any(mask):
            return None
        return self._ds[np.flatnonzero(mask)[0]]

    def where(self, **kwargs) -> Self:
        """
        Keeps the rows whose columns match every given value. A sequence matches any of its items.

        Raises:
            KeyError: If a keyword does not name a column.
        """
        conditions = np.ones(len(self._ds), dtype=bool)

        for field_name, value in kwargs.items():
            if field_name not in self._ds.colnames:
                raise KeyError(f"Unknown column '{field_name}', columns are {self._ds.colnames}")
            if isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, (str, bytes)):
                conditions &= np.isin(self._ds[field_name], value)
            else:
                conditions &= self._ds[field_name] == value
        return self._factory(self._ds[conditions])

    def where_true(self, bit_mask: np.ndarray) -> Self:
        return self._factory(self._ds[bit_mask])

    def get_unit(self, column_name: str) -> Optional[u.Unit]:
        return getattr(self._ds[column_name], "unit", None)

    def to_pandas(self) -> pd.DataFrame:
        if len(self._ds) == 0:
            return pd.DataFrame(columns=self._ds.colnames)
        # The id index becomes the DataFrame index; move it back to a regular column
        return self._ds.to_pandas().reset_index()
