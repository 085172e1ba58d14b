"""Tests for type definitions."""

from __future__ import annotations

import pytest

from sprite_atlas.types import (
    AnimationDesc,
    AnimationManifest,
    AssetLookupError,
    AtlasError,
    CompiledAnimation,
    DuplicateKeyError,
    FrameRegion,
    CompiledFrame,
    ManifestParseError,
    ManifestValidationError,
    Manifest,
    Pivot,
    Rect,
    SheetFrame,
    Size,
    SpriteSheetManifest,
)


class TestGeometry:
    """Tests for Rect, Size and Pivot."""

    def test_rect_inside_image(self):
        """Test a region touching the image edges is contained."""
        assert Rect(48, 0, 16, 16).contains_within(Size(64, 16)) is True

    def test_rect_past_right_edge(self):
        """Test a region overflowing horizontally is rejected."""
        assert Rect(49, 0, 16, 16).contains_within(Size(64, 16)) is False

    def test_rect_past_bottom_edge(self):
        """Test a region overflowing vertically is rejected."""
        assert Rect(0, 1, 16, 16).contains_within(Size(64, 16)) is False

    def test_rect_negative_origin(self):
        """Test a region starting before the image is rejected."""
        assert Rect(-1, 0, 4, 4).contains_within(Size(64, 16)) is False
        assert Rect(0, -1, 4, 4).contains_within(Size(64, 16)) is False

    def test_rect_xywh(self):
        """Test unpacking a rect."""
        assert Rect(1, 2, 3, 4).xywh() == (1, 2, 3, 4)

    def test_pivot_bounds_inclusive(self):
        """Test pivot components may be exactly 0 or 1."""
        assert Pivot(0.0, 1.0).is_valid() is True
        assert Pivot(0.5, 0.5).is_valid() is True

    def test_pivot_out_of_range(self):
        """Test pivot components outside [0, 1] are invalid."""
        assert Pivot(1.01, 0.5).is_valid() is False
        assert Pivot(0.5, -0.1).is_valid() is False

    def test_size_str(self):
        """Test size formatting."""
        assert str(Size(64, 16)) == "64x16"


class TestManifestDecoding:
    """Tests for decoding manifest dictionaries."""

    def test_manifest_from_dict(self):
        """Test decoding the top-level collection list."""
        m = Manifest.from_dict(
            {"collections": [{"name": "hero", "spritesheet": "s.json", "animations": ["a.json"]}]}
        )
        assert len(m.collections) == 1
        assert m.collections[0].name == "hero"
        assert m.collections[0].animations == ["a.json"]

    def test_missing_fields_default_to_zero_values(self):
        """Test absent fields decode to empty values for validation to catch."""
        m = Manifest.from_dict({"collections": [{}]})
        c = m.collections[0]
        assert c.name == "" and c.spritesheet == "" and c.animations == []

    def test_sheet_frame_defaults_pivot(self):
        """Test a frame without pivot gets (0, 0)."""
        f = SheetFrame.from_dict({"filename": "a", "frame": {"x": 1, "y": 2, "w": 3, "h": 4}}, 0)
        assert f.roi == Rect(1, 2, 3, 4)
        assert f.pivot == Pivot(0.0, 0.0)

    def test_integer_pivot_becomes_float(self):
        """Test integer pivot coordinates are accepted."""
        f = SheetFrame.from_dict({"filename": "a", "pivot": {"x": 1, "y": 0}}, 0)
        assert f.pivot == Pivot(1.0, 0.0)
        assert isinstance(f.pivot.x, float)

    def test_wrong_type_is_parse_error(self):
        """Test a string coordinate is a parse error."""
        with pytest.raises(ManifestParseError, match="frame #2"):
            SheetFrame.from_dict({"filename": "a", "frame": {"x": "1"}}, 2)

    def test_bool_is_not_int(self):
        """Test JSON booleans aren't accepted as integers."""
        with pytest.raises(ManifestParseError):
            AnimationDesc.from_dict({"name": "a", "fps": True, "frames": []}, 0)

    def test_non_object_document(self):
        """Test a document that isn't an object is a parse error."""
        with pytest.raises(ManifestParseError):
            SpriteSheetManifest.from_dict([1, 2, 3])

    def test_animation_manifest_flips(self):
        """Test flip flags are decoded."""
        m = AnimationManifest.from_dict(
            {
                "spritesheet": "sheet.json",
                "animations": [
                    {"name": "a", "fps": 0, "frames": [{"key": "k", "flipH": True}]}
                ],
            }
        )
        spec = m.animations[0].frames[0]
        assert spec.key == "k"
        assert spec.flip_h is True
        assert spec.flip_v is False
        assert m.spritesheet == "sheet.json"


class TestCompiledAnimation:
    """Tests for compiled animation invariants."""

    def _frame(self) -> CompiledFrame:
        return CompiledFrame(region=FrameRegion("k", None, Rect(0, 0, 1, 1)))

    def test_empty_sequence_rejected(self):
        """Test a compiled animation needs frames."""
        with pytest.raises(ValueError):
            CompiledAnimation(name="a", fps=10, frames=())

    def test_static_multi_frame_rejected(self):
        """Test fps 0 with several frames is rejected."""
        with pytest.raises(ValueError):
            CompiledAnimation(name="a", fps=0, frames=(self._frame(), self._frame()))

    def test_static_pose(self):
        """Test a single frame at fps 0 is a static pose."""
        anim = CompiledAnimation(name="a", fps=0, frames=(self._frame(),))
        assert anim.is_static is True
        assert anim.frame_count == 1


class TestErrors:
    """Tests for the error hierarchy."""

    def test_all_errors_are_atlas_errors(self):
        """Test every error derives from AtlasError."""
        assert issubclass(ManifestParseError, AtlasError)
        assert issubclass(ManifestValidationError, AtlasError)
        assert issubclass(DuplicateKeyError, AtlasError)
        assert issubclass(AssetLookupError, AtlasError)

    def test_lookup_error_is_builtin_lookup_error(self):
        """Test unknown-key errors can be caught as LookupError."""
        with pytest.raises(LookupError):
            raise AssetLookupError("frame", "nope")

    def test_validation_error_message(self):
        """Test validation errors name the entity, index and reason."""
        err = ManifestValidationError("is out of image boundaries", "frame", 3, "walk_3")
        assert str(err) == "frame #3 (walk_3) is out of image boundaries"
        assert err.index == 3
        assert err.name == "walk_3"

    def test_context_in_message(self):
        """Test collection and path are appended to the message."""
        err = DuplicateKeyError("frame", "a")
        err.collection = "hero"
        err.path = "x/sheet.json"
        assert str(err) == "frame 'a' already exists [collection 'hero', x/sheet.json]"
