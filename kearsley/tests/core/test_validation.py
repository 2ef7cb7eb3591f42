'''Unit tests for point set validation'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest
import numpy as np

from kearsley.validation import (
    validate_point_sets,
    InvalidArgumentError,
    ColumnCountError,
    RowCountMismatchError,
)


POINTS = np.arange(15, dtype=float).reshape(5, 3)


def test_valid_point_sets_coerced() -> None:
    '''Test that valid array-likes are passed through as float arrays'''
    u, v = validate_point_sets(POINTS.astype(int).tolist(), POINTS)
    assert (u.dtype == float) and np.array_equal(u, POINTS) and np.array_equal(v, POINTS)

@pytest.mark.parametrize(
    'u, v, argument',
    [
        (POINTS[:, :2], POINTS, 'u'),
        (POINTS, POINTS[:, :2], 'v'),
        (np.hstack([POINTS, POINTS]), POINTS, 'u'),
        (POINTS[0], POINTS, 'u'), # 1D arrays have no column axis
        (POINTS[:, :2], POINTS[:, :2], 'u'), # u is checked first
    ]
)
def test_column_count_error(u : np.ndarray, v : np.ndarray, argument : str) -> None:
    '''Test that point sets without exactly 3 columns are rejected, naming the offending argument'''
    with pytest.raises(ColumnCountError) as exc_info:
        _ = validate_point_sets(u, v)
    assert exc_info.value.argument == argument

def test_row_count_mismatch_error() -> None:
    '''Test that point sets with differing numbers of points are rejected'''
    with pytest.raises(RowCountMismatchError, match='same number of rows'):
        _ = validate_point_sets(POINTS[:-1], POINTS)

@pytest.mark.parametrize('error_type', (ColumnCountError, RowCountMismatchError))
def test_errors_share_kind(error_type : type) -> None:
    '''Test that all validation errors are a kind of InvalidArgumentError (and hence ValueError)'''
    assert issubclass(error_type, InvalidArgumentError) and issubclass(error_type, ValueError)

def test_column_messages_distinguishable() -> None:
    '''Test that column errors for u and v carry distinct messages'''
    with pytest.raises(ColumnCountError) as exc_u:
        _ = validate_point_sets(POINTS[:, :2], POINTS)
    with pytest.raises(ColumnCountError) as exc_v:
        _ = validate_point_sets(POINTS, POINTS[:, :2])
    assert str(exc_u.value).startswith('u ') and str(exc_v.value).startswith('v ')

def test_non_finite_coordinates_warned(caplog : pytest.LogCaptureFixture) -> None:
    '''Test that non-finite coordinates are let through, but logged as a warning'''
    points = POINTS.copy()
    points[2, 1] = np.nan
    with caplog.at_level('WARNING', logger='kearsley.validation'):
        _ = validate_point_sets(POINTS, points)
    assert 'non-finite' in caplog.text

def test_empty_point_set_warned(caplog : pytest.LogCaptureFixture) -> None:
    '''Test that point sets with no points are let through, but logged as a warning'''
    empty = np.empty((0, 3))
    with caplog.at_level('WARNING', logger='kearsley.validation'):
        u, v = validate_point_sets(empty, empty)
    assert (u.shape == (0, 3)) and ('no points' in caplog.text)
