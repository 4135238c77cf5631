"""Tests for commit store."""

import hashlib

import pytest

from svcs.core.commit_store import COMMITTED, MESSAGE_MISSING, NOTHING_TO_COMMIT, CommitStore
from svcs.core.index_store import IndexStore
from svcs.core.log_store import LogStore
from svcs.core.results import Status


@pytest.fixture
def tracked_project(context, work_dir):
    """Track a single file a.txt containing 'hello'."""
    (work_dir / "a.txt").write_text("hello")
    IndexStore(context).track(["a.txt"])
    return work_dir


@pytest.fixture
def store(context):
    """Create a CommitStore instance."""
    return CommitStore(context)


def _commit_dirs(context):
    return sorted(p.name for p in context.commits_dir.iterdir())


class TestCommitStore:
    def test_first_commit(self, store, context, tracked_project):
        """Committing stores a verbatim copy and one log entry."""
        result = store.commit(["first"], author="alice")

        expected = hashlib.sha256(b"a.txthello").hexdigest()
        assert result.status == Status.CREATED
        assert result.message == COMMITTED
        assert result.identifier == expected
        assert (context.commit_dir(expected) / "a.txt").read_text() == "hello"
        assert context.log_file.read_text(encoding="utf-8") == (
            f"commit {expected}\nAuthor: alice\nfirst"
        )

    def test_second_commit_is_newest_first(self, store, context, tracked_project):
        first = store.commit(["first"], author="alice")
        (tracked_project / "a.txt").write_text("world")

        second = store.commit(["second"], author="alice")

        assert second.status == Status.CREATED
        assert second.identifier != first.identifier
        assert _commit_dirs(context) == sorted([first.identifier, second.identifier])
        log = context.log_file.read_text(encoding="utf-8")
        assert log == (
            f"commit {second.identifier}\nAuthor: alice\nsecond\n\n"
            f"commit {first.identifier}\nAuthor: alice\nfirst"
        )

    def test_unchanged_recommit_is_nothing_to_commit(self, store, context, tracked_project):
        store.commit(["first"])
        log_before = context.log_file.read_text(encoding="utf-8")

        result = store.commit(["again"])

        assert result.status == Status.NOTHING_TO_COMMIT
        assert result.message == NOTHING_TO_COMMIT
        assert len(_commit_dirs(context)) == 1
        assert context.log_file.read_text(encoding="utf-8") == log_before

    def test_empty_index_is_nothing_to_commit(self, store, context):
        log_before = context.log_file.read_text(encoding="utf-8")

        result = store.commit(["init"])

        assert result.status == Status.NOTHING_TO_COMMIT
        assert _commit_dirs(context) == []
        assert context.log_file.read_text(encoding="utf-8") == log_before

    def test_all_tracked_files_missing_is_nothing_to_commit(self, store, context, tracked_project):
        (tracked_project / "a.txt").unlink()

        result = store.commit(["gone"])

        assert result.status == Status.NOTHING_TO_COMMIT
        assert _commit_dirs(context) == []

    def test_recommit_of_older_snapshot_logs_again_without_copying(self, store, context, tracked_project):
        """Only the latest entry counts as a duplicate; the directory is reused."""
        first = store.commit(["first"])
        (tracked_project / "a.txt").write_text("world")
        store.commit(["second"])
        (tracked_project / "a.txt").write_text("hello")
        marker = context.commit_dir(first.identifier) / "a.txt"
        mtime_before = marker.stat().st_mtime_ns

        third = store.commit(["back to hello"])

        assert third.status == Status.CREATED
        assert third.identifier == first.identifier
        assert len(_commit_dirs(context)) == 2
        assert marker.stat().st_mtime_ns == mtime_before
        assert LogStore(context).latest_is(first.identifier)
        assert context.log_file.read_text(encoding="utf-8").count(f"commit {first.identifier}") == 2

    def test_multiple_files(self, store, context, tracked_project):
        (tracked_project / "b.txt").write_bytes(b"\x00\xffbinary")
        IndexStore(context).track(["b.txt"])

        result = store.commit(["two files"])

        commit_dir = context.commit_dir(result.identifier)
        assert (commit_dir / "a.txt").read_text() == "hello"
        assert (commit_dir / "b.txt").read_bytes() == b"\x00\xffbinary"
        assert result.identifier == hashlib.sha256(b"a.txthellob.txt\x00\xffbinary").hexdigest()

    def test_nested_file(self, store, context, work_dir):
        (work_dir / "src").mkdir()
        (work_dir / "src" / "main.py").write_text("pass")
        IndexStore(context).track(["src/main.py"])

        result = store.commit(["nested"])

        assert (context.commit_dir(result.identifier) / "src" / "main.py").read_text() == "pass"

    def test_message_missing(self, store, context, tracked_project):
        result = store.commit([])

        assert result.status == Status.MESSAGE_MISSING
        assert result.message == MESSAGE_MISSING
        assert _commit_dirs(context) == []
        assert context.log_file.read_text(encoding="utf-8") == ""

    def test_too_many_arguments(self, store, context, tracked_project):
        result = store.commit(["one", "two"])

        assert result.status == Status.INVALID_ARGUMENTS
        assert _commit_dirs(context) == []
        assert context.log_file.read_text(encoding="utf-8") == ""

    def test_empty_author(self, store, context, tracked_project):
        result = store.commit(["anonymous"])

        assert context.log_file.read_text(encoding="utf-8") == (
            f"commit {result.identifier}\nAuthor: \nanonymous"
        )

    def test_store_file_in_index_does_not_break_recommit(self, store, context, tracked_project):
        """A hand-edited index naming the log still commits idempotently."""
        context.index_file.write_text("a.txt\nvcs/log.txt", encoding="utf-8")

        first = store.commit(["first"])
        second = store.commit(["again"])

        assert first.status == Status.CREATED
        assert second.status == Status.NOTHING_TO_COMMIT
        assert first.identifier == hashlib.sha256(b"a.txthello").hexdigest()
