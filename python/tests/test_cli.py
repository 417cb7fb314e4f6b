"""
CLI Tests - Verify the command-line entry point.
"""

import pytest

from textsearch import cli
from textsearch.cli import main


class TestCli:
    """Tests for the textsearch command."""
    
    def test_prints_occurrences(self, sample_tree, temp_dir, capsys):
        """Each occurrence is printed as file:line:offset."""
        assert main(["needle", str(temp_dir), "-j", "2"]) == 0
        
        lines = set(capsys.readouterr().out.splitlines())
        assert lines == {
            f"{sample_tree['top']}:1:6",
            f"{sample_tree['readme']}:3:0",
            f"{sample_tree['readme']}:3:7",
            f"{sample_tree['nested']}:1:16",
        }
    
    def test_missing_root_prints_nothing(self, temp_dir, capsys):
        """A missing root is not an error."""
        assert main(["needle", str(temp_dir / "nope")]) == 0
        
        assert capsys.readouterr().out == ""
    
    def test_rejects_bad_concurrency(self, temp_dir):
        """Invalid limits are usage errors."""
        with pytest.raises(SystemExit) as exc:
            main(["needle", str(temp_dir), "--concurrency", "0"])
        
        assert exc.value.code == 2
    
    def test_rejects_unknown_encoding(self, temp_dir, capsys):
        """An unknown codec is a usage error."""
        with pytest.raises(SystemExit) as exc:
            main(["needle", str(temp_dir), "--encoding", "no-such-codec"])
        
        assert exc.value.code == 2
        assert "unknown encoding" in capsys.readouterr().err
    
    def test_closed_pipe_exits_quietly(self, sample_tree, temp_dir, monkeypatch, capsys):
        """A reader closing the pipe early is not an error."""
        def closed_pipe(*args, **kwargs):
            raise BrokenPipeError
        
        monkeypatch.setattr(cli, "print", closed_pipe, raising=False)
        
        assert main(["needle", str(temp_dir)]) == 0
