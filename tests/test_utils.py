import logging
import warnings

import pytest
from astropy.table import QTable

from orbits import SystemDB, generate
from orbits.utils import LoggedMessageError, warnings_as_exceptions
from tests.utils import compare_qtables


class TestUtils:
    def test_compare_tables(self, handmade_system):
        table = SystemDB.from_state(handmade_system).view
        assert compare_qtables(expected_table=table, test_table=table.copy())

    def test_compare_tables_mismatch(self):
        with pytest.raises(AssertionError) as excinfo:
            compare_qtables(QTable({"a": [1.0, 2.0]}), QTable({"a": [1.0, 3.0]}))
        assert "Values don't match for column 'a'" in str(excinfo.value)

    def test_warnings_as_exceptions(self):
        with pytest.raises(RuntimeWarning):
            with warnings_as_exceptions([RuntimeWarning]):
                warnings.warn("overflow", RuntimeWarning)

    def test_other_warnings_are_untouched(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            with warnings_as_exceptions([RuntimeWarning]):
                warnings.warn("just a hint", UserWarning)
        assert [str(w.message) for w in caught] == ["just a hint"]

    def test_log_messages_as_exceptions(self):
        with pytest.raises(LoggedMessageError) as excinfo:
            with warnings_as_exceptions(logger_name="orbits"):
                logging.getLogger("orbits.tests").warning("something is off")
        assert "something is off" in str(excinfo.value)
        assert excinfo.value.record.levelno == logging.WARNING

    def test_quiet_generation(self):
        # Generating logs at DEBUG only, which stays below the threshold
        with warnings_as_exceptions(logger_name="orbits"):
            generate("quiet")
