"""Tests for the graphwalk command line."""

import json

import pytest

from graphwalk.cli import main


class TestMazeCommands:
    """Tests for `graphwalk maze solve`."""

    def test_solve(self, maze_file, capsys):
        assert main(["maze", "solve", "--input", str(maze_file)]) == 0
        out = capsys.readouterr().out
        assert 'Directions to Win: ["Down", "Down", "Right", "Right"]' in out

    def test_solve_show(self, maze_file, capsys):
        assert main(["maze", "solve", "--input", str(maze_file), "--show"]) == 0
        assert "*#." in capsys.readouterr().out

    def test_lose(self, tmp_path, capsys):
        path = tmp_path / "blocked.txt"
        path.write_text("S#E\n")

        assert main(["maze", "solve", "--input", str(path)]) == 0
        assert capsys.readouterr().out.strip() == "lose"

    def test_missing_file(self, tmp_path, capsys):
        assert main(["maze", "solve", "--input", str(tmp_path / "nope.txt")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_empty_file(self, tmp_path, capsys):
        path = tmp_path / "empty.txt"
        path.write_text("\n\n")

        assert main(["maze", "solve", "--input", str(path)]) == 1
        assert "empty" in capsys.readouterr().err


class TestSocialNetworkCommands:
    """Tests for `graphwalk social-network ...`."""

    def test_load(self, network_file, capsys):
        assert main(["social-network", "load", "--input", str(network_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["people"] == ["alice", "bob", "carol", "erin", "frank"]
        assert data["dropped"] == ["dave", "x,y,z"]

    def test_visualize(self, network_file, tmp_path, capsys):
        output = tmp_path / "friends.dot"

        assert main([
            "social-network", "visualize",
            "--input", str(network_file),
            "--output", str(output),
        ]) == 0
        assert "Done! Wrote dot file to" in capsys.readouterr().out
        assert '"bob" -- "carol";' in output.read_text()

    def test_find_friend_group(self, network_file, capsys):
        assert main([
            "social-network", "find-friend-group",
            "--input", str(network_file),
            "--person", "alice",
        ]) == 0
        assert capsys.readouterr().out.splitlines() == ["alice", "bob", "carol"]

    def test_friend_groups(self, network_file, capsys):
        assert main(["social-network", "friend-groups", "--input", str(network_file)]) == 0
        assert capsys.readouterr().out.splitlines() == ["alice,bob,carol", "erin,frank"]

    def test_missing_network_file(self, tmp_path, capsys):
        assert main([
            "social-network", "load", "--input", str(tmp_path / "nope.txt")
        ]) == 1

    def test_invalid_utf8_network_file(self, tmp_path, capsys):
        path = tmp_path / "friends.txt"
        path.write_bytes(b"alice,b\xffob\n")

        for command in (["load"], ["friend-groups"], ["find-friend-group", "--person", "alice"]):
            assert main(["social-network", *command, "--input", str(path)]) == 1
        assert "Failed to read network file" in capsys.readouterr().err

    def test_network_path_is_directory(self, tmp_path, capsys):
        assert main(["social-network", "load", "--input", str(tmp_path)]) == 1
        assert "Path is not a file" in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        main([])
