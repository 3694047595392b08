"""
Tests for the interactive and hidden photo sessions.
"""

import os
from unittest.mock import MagicMock, patch

import cv2
import pytest

from capture.naming import FileNamer
from capture.photo import take_hidden_photo, take_photo
from models.config import PhotoConfig

from conftest import solid_frames

NO_KEY = -1
SPACE = ord(" ")


@pytest.fixture
def gui():
    with patch("cv2.namedWindow") as named, \
            patch("cv2.imshow") as show, \
            patch("cv2.destroyAllWindows") as destroy, \
            patch("cv2.waitKey", return_value=NO_KEY) as wait:
        yield MagicMock(namedWindow=named, imshow=show, destroyAllWindows=destroy, waitKey=wait)


class TestTakePhoto:
    def test_each_space_press_saves_a_photo(self, make_camera, gui, tmp_path):
        frames = solid_frames(5, step=60)
        camera = make_camera(frames)
        gui.waitKey.side_effect = [SPACE, NO_KEY, SPACE, SPACE, ord("q")]

        saved = take_photo(camera, PhotoConfig(), FileNamer(str(tmp_path)))

        assert len(saved) == 3
        assert len(set(saved)) == 3
        assert sorted(os.listdir(tmp_path)) == sorted(os.path.basename(p) for p in saved)

        # Photo content matches the frame on screen at the key press
        for path, level in zip(saved, (0, 120, 180)):
            image = cv2.imread(path)
            assert image is not None
            assert image.shape == (48, 64, 3)
            assert abs(float(image.mean()) - level) < 3

    def test_timestamps_increase(self, make_camera, gui, tmp_path):
        camera = make_camera(solid_frames(3))
        gui.waitKey.side_effect = [SPACE, SPACE, SPACE]

        with patch("capture.naming.timestamp_ms", return_value=1234):
            saved = take_photo(camera, PhotoConfig(), FileNamer(str(tmp_path)))

        stamps = [int(os.path.basename(p)[len("photo_"):-len(".jpg")]) for p in saved]
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == 3

    def test_quit_without_photos(self, make_camera, gui, tmp_path):
        camera = make_camera(solid_frames(5))
        gui.waitKey.side_effect = [NO_KEY, ord("Q")]

        saved = take_photo(camera, PhotoConfig(), FileNamer(str(tmp_path)))

        assert saved == []
        assert os.listdir(tmp_path) == []
        assert camera.reads == 2
        gui.destroyAllWindows.assert_called_once()

    def test_empty_frame_ends_session(self, make_camera, gui, tmp_path):
        camera = make_camera([])

        saved = take_photo(camera, PhotoConfig(), FileNamer(str(tmp_path)))

        assert saved == []
        gui.namedWindow.assert_called_once()
        gui.imshow.assert_not_called()
        gui.waitKey.assert_not_called()
        gui.destroyAllWindows.assert_called_once()

    def test_window_closed_when_display_fails(self, make_camera, gui, tmp_path):
        camera = make_camera(solid_frames(1))
        gui.imshow.side_effect = cv2.error("no display")

        with pytest.raises(cv2.error):
            take_photo(camera, PhotoConfig(), FileNamer(str(tmp_path)))

        gui.destroyAllWindows.assert_called_once()

    def test_failed_write_not_reported_as_saved(self, make_camera, gui, tmp_path, capsys):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        camera = make_camera(solid_frames(2))
        gui.waitKey.side_effect = [SPACE, ord("q")]

        saved = take_photo(camera, PhotoConfig(), FileNamer(str(blocker)))

        assert saved == []
        out = capsys.readouterr().out
        assert "Photo saved as" not in out
        assert "Error: Could not save photo" in out
        gui.destroyAllWindows.assert_called_once()

    def test_session_continues_after_failed_write(self, make_camera, gui, tmp_path):
        camera = make_camera(solid_frames(3))
        gui.waitKey.side_effect = [SPACE, SPACE, ord("q")]

        with patch("capture.photo.cv2.imwrite", side_effect=[False, True]):
            saved = take_photo(camera, PhotoConfig(), FileNamer(str(tmp_path)))

        assert len(saved) == 1
        assert camera.reads == 3


class TestTakeHiddenPhoto:
    def test_saves_one_frame_without_window(self, make_camera, gui, tmp_path, capsys):
        camera = make_camera(solid_frames(3))

        path = take_hidden_photo(camera, PhotoConfig(), FileNamer(str(tmp_path)))

        assert path is not None
        assert os.path.basename(path).startswith("hidden_photo_")
        assert path.endswith(".jpg")
        assert os.listdir(tmp_path) == [os.path.basename(path)]
        assert cv2.imread(path).shape == (48, 64, 3)
        assert camera.reads == 1
        gui.namedWindow.assert_not_called()
        gui.imshow.assert_not_called()
        gui.waitKey.assert_not_called()
        assert f"Hidden photo saved as: {path}" in capsys.readouterr().out

    def test_empty_frame_does_nothing(self, make_camera, gui, tmp_path, capsys):
        camera = make_camera([])

        path = take_hidden_photo(camera, PhotoConfig(), FileNamer(str(tmp_path)))

        assert path is None
        assert os.listdir(tmp_path) == []
        assert capsys.readouterr().out == ""
        gui.namedWindow.assert_not_called()

    def test_failed_write_returns_none(self, make_camera, gui, tmp_path, capsys):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        camera = make_camera(solid_frames(1))

        path = take_hidden_photo(camera, PhotoConfig(), FileNamer(str(blocker)))

        assert path is None
        out = capsys.readouterr().out
        assert "Hidden photo saved as" not in out
        assert "Error: Could not save photo" in out
