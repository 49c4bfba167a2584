from nctcdf import REFERENCE_VALUES, ReferenceValue, reference_values


def test_table_shape():
    rows = list(reference_values())
    assert len(rows) == 30
    assert all(isinstance(row, ReferenceValue) for row in rows)
    assert all(isinstance(row.df, int) and row.df >= 1 for row in rows)
    assert all(0.0 < row.expected_cdf < 1.0 for row in rows)


def test_restartable():
    it = reference_values()
    first = next(it)
    assert list(reference_values())[0] == first
    assert list(reference_values()) == list(REFERENCE_VALUES)


def test_first_and_last_rows():
    assert REFERENCE_VALUES[0] == (1, 0.0, 3.0, 0.8975836176504333)
    assert REFERENCE_VALUES[-1] == (10, 4.0, 6.0, 0.8688007350)
