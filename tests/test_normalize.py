from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np
import torch

try:
    import pandas as pd
except ImportError:  # pragma: no cover - optional dependency
    pd = None

from chart_highlight import ChartDataError, dataset_from_xy
from chart_highlight.axis import AXIS_SECONDARY
from chart_highlight.entries import Entry


class DatasetFromXYTests(unittest.TestCase):
    def test_default_x_is_sample_index(self) -> None:
        ds = dataset_from_xy([4, 5, 6])
        self.assertEqual([(e.x, e.y) for e in ds.entries], [(0.0, 4.0), (1.0, 5.0), (2.0, 6.0)])

    def test_numpy_and_torch_inputs(self) -> None:
        ds = dataset_from_xy(torch.tensor([1.0, 2.0]), x=np.asarray([10, 20], dtype=np.int64), label="t")
        self.assertEqual(ds.entries, (Entry(x=10.0, y=1.0), Entry(x=20.0, y=2.0)))
        self.assertEqual(ds.label, "t")

    def test_unsorted_x_is_ordered(self) -> None:
        ds = dataset_from_xy([1.0, 2.0, 3.0], x=[3.0, 1.0, 2.0])
        self.assertEqual([e.x for e in ds.entries], [1.0, 2.0, 3.0])
        self.assertEqual([e.y for e in ds.entries], [2.0, 3.0, 1.0])

    def test_non_finite_rows_dropped(self) -> None:
        ds = dataset_from_xy([1.0, None, Decimal("2.5"), float("nan")])
        self.assertEqual([(e.x, e.y) for e in ds.entries], [(0.0, 1.0), (2.0, 2.5)])

    def test_stacks_build_stacked_entries(self) -> None:
        ds = dataset_from_xy(stacks=np.asarray([[1.0, 2.0], [3.0, -1.0]]), x=[0.0, 1.0], axis=AXIS_SECONDARY)
        self.assertEqual(ds.axis, AXIS_SECONDARY)
        first, second = ds.entries
        self.assertEqual(first.stack_values, (1.0, 2.0))
        self.assertEqual(first.y, 3.0)
        self.assertEqual(second.y, 2.0)

    def test_flags_pass_through(self) -> None:
        ds = dataset_from_xy([1.0], highlight_enabled=False)
        self.assertFalse(ds.highlight_enabled)

    def test_invalid_inputs(self) -> None:
        with self.assertRaises(ChartDataError):
            dataset_from_xy()
        with self.assertRaises(ChartDataError):
            dataset_from_xy([])
        with self.assertRaises(ChartDataError):
            dataset_from_xy([1.0, 2.0], x=[1.0])
        with self.assertRaises(ChartDataError):
            dataset_from_xy([float("nan")])
        with self.assertRaises(ChartDataError):
            dataset_from_xy(["a", "b"])
        with self.assertRaises(ChartDataError):
            dataset_from_xy(np.zeros((2, 2)))
        with self.assertRaises(ChartDataError):
            dataset_from_xy("abc")
        with self.assertRaises(ChartDataError):
            dataset_from_xy(stacks=[1.0, 2.0])



@unittest.skipUnless(pd is not None, "pandas not installed")
class DataFrameInputTests(unittest.TestCase):
    def test_columns_selected_by_name(self) -> None:
        frame = pd.DataFrame({"t": [3.0, 1.0, 2.0], "v": [30, 10, 20]})
        ds = dataset_from_xy("v", x="t", data=frame, label="frame")
        self.assertEqual([(e.x, e.y) for e in ds.entries], [(1.0, 10.0), (2.0, 20.0), (3.0, 30.0)])
        self.assertEqual(ds.label, "frame")

    def test_single_numeric_column_is_inferred(self) -> None:
        frame = pd.DataFrame({"name": ["a", "b"], "v": [1.5, 2.5]})
        ds = dataset_from_xy(data=frame)
        self.assertEqual([(e.x, e.y) for e in ds.entries], [(0.0, 1.5), (1.0, 2.5)])

    def test_ambiguous_numeric_columns_rejected(self) -> None:
        frame = pd.DataFrame({"a": [1.0], "b": [2.0]})
        with self.assertRaises(ChartDataError):
            dataset_from_xy(data=frame)

    def test_missing_column_rejected(self) -> None:
        frame = pd.DataFrame({"v": [1.0, 2.0]})
        with self.assertRaises(ChartDataError):
            dataset_from_xy("w", data=frame)
        with self.assertRaises(ChartDataError):
            dataset_from_xy("v", x="t", data=frame)

    def test_series_input(self) -> None:
        ds = dataset_from_xy(pd.Series([4.0, None, 6.0]), x=pd.Series([0, 1, 2]))
        self.assertEqual([(e.x, e.y) for e in ds.entries], [(0.0, 4.0), (2.0, 6.0)])

    def test_data_must_be_a_frame(self) -> None:
        with self.assertRaises(ChartDataError):
            dataset_from_xy("v", data={"v": [1.0]})

    def test_frame_as_stacks(self) -> None:
        frame = pd.DataFrame({"low": [1.0, 2.0], "high": [3.0, 4.0]})
        ds = dataset_from_xy(stacks=frame)
        self.assertEqual([e.stack_values for e in ds.entries], [(1.0, 3.0), (2.0, 4.0)])


if __name__ == "__main__":
    unittest.main()
