"""
Unit tests for Cell class.

Tests default values, content tags, visibility helpers and
observation conversion.
"""
import pytest
from mines import Cell, Content, Visibility


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.visibility == Visibility.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_shown is False

    def test_default_cell_is_empty(self) -> None:
        """New cell should have no adjacent mines."""
        cell = Cell()
        assert cell.adjacent_mines == 0
        assert cell.content == Content.EMPTY


# ============================================================================
# Content Tests
# ============================================================================

class TestCellContent:
    """Test the content tag."""

    def test_mine_content(self, mine_cell: Cell) -> None:
        """A mine reports MINE content."""
        assert mine_cell.content == Content.MINE

    @pytest.mark.parametrize("count", range(1, 9))
    def test_count_content(self, count: int) -> None:
        """A cell next to mines reports COUNT content."""
        assert Cell(adjacent_mines=count).content == Content.COUNT


# ============================================================================
# Visibility Tests
# ============================================================================

class TestCellVisibility:
    """Test visibility helpers."""

    def test_flagged_cell_is_still_hidden(self, hidden_cell: Cell) -> None:
        """A flag keeps the cell covered."""
        hidden_cell.visibility = Visibility.FLAGGED
        assert hidden_cell.is_flagged is True
        assert hidden_cell.is_hidden is True

    def test_revealed_cell_is_shown(self, hidden_cell: Cell) -> None:
        """A revealed cell is shown and not hidden."""
        hidden_cell.visibility = Visibility.REVEALED
        assert hidden_cell.is_shown is True
        assert hidden_cell.is_hidden is False

    def test_mine_can_explode(self, mine_cell: Cell) -> None:
        """Exploding a mine marks it as shown."""
        mine_cell.explode()
        assert mine_cell.is_exploded is True
        assert mine_cell.is_shown is True

    def test_safe_cell_cannot_explode(self, hidden_cell: Cell) -> None:
        """Only mines may explode."""
        with pytest.raises(ValueError, match="Only a mine"):
            hidden_cell.explode()
        assert hidden_cell.visibility == Visibility.HIDDEN


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test integer observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        hidden_cell.visibility = Visibility.FLAGGED
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count, visibility=Visibility.REVEALED)
        assert cell.to_observation() == count

    def test_exploded_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Exploded mine should return 9 for observation."""
        mine_cell.explode()
        assert mine_cell.to_observation() == 9
