"""End-to-end tests for the maintenance scripts against an in-memory store."""

import pytest

import admin_tools
import cleanup_database
import config
import migrate_budgets
from infrastructure.store_errors import StoreConnectionError, StoreReadError, StoreWriteError

from tests.conftest import TARGET_BUDGET, make_store


class TestCleanupScript:
    def test_success(self, capsys):
        store = make_store()

        exit_code = cleanup_database.main([], store=store)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Loans: 2 removed" in out
        assert "Managers reset: 3" in out
        assert "completed successfully" in out
        assert "loans" not in store.snapshot()

    def test_partial_failure_exit_code(self, capsys):
        store = make_store()
        store.fail_writes["managers/bob"] = StoreWriteError("denied", "managers/bob")

        exit_code = cleanup_database.main(["--concurrency", "2"], store=store)

        captured = capsys.readouterr()
        assert exit_code == 2
        assert "Managers failed: 1" in captured.out
        assert "re-run" in captured.err

    def test_fatal_delete_failure(self, capsys):
        store = make_store()
        store.fail_writes["matches"] = StoreWriteError("denied", "matches")

        exit_code = cleanup_database.main([], store=store)

        assert exit_code == 1
        assert "cleanup aborted" in capsys.readouterr().err
        assert store.snapshot()["managers"]["alice"]["points"] == 12

    def test_connection_failure(self, capsys):
        store = make_store()
        store.fail_connect = StoreConnectionError("unreachable")

        assert cleanup_database.main([], store=store) == 1
        assert "unreachable" in capsys.readouterr().err

    def test_lost_connection_mid_sweep_is_fatal(self, capsys):
        store = make_store()
        store.fail_writes["managers/bob"] = StoreConnectionError("connection reset", "managers/bob")

        exit_code = cleanup_database.main([], store=store)

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "cleanup aborted: connection reset" in captured.err
        assert "re-run" not in captured.err

    def test_dry_run(self, capsys):
        store = make_store()
        before = store.snapshot()

        exit_code = cleanup_database.main(["--dry-run", "--verbose"], store=store)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "DRY RUN" in out
        assert "Reset Alice (Budget: $500.0M preserved)" in out
        assert store.snapshot() == before

    def test_missing_database_url(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "FIREBASE_DATABASE_URL", None)

        assert cleanup_database.main([]) == 1
        assert "FIREBASE_DATABASE_URL" in capsys.readouterr().err


class TestMigrateBudgetsScript:
    def test_success(self, capsys):
        store = make_store()

        exit_code = migrate_budgets.main(["--target", str(TARGET_BUDGET)], store=store)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Updated Alice (alice)" in out
        assert "Skipped Bob (already has $900.0M)" in out
        assert "Updated: 1 manager" in out
        assert "Skipped: 2 managers" in out
        assert store.snapshot()["managers"]["alice"]["budget"] == TARGET_BUDGET

    def test_target_is_required(self):
        with pytest.raises(SystemExit) as exc_info:
            migrate_budgets.main([], store=make_store())
        assert exc_info.value.code == 2

    def test_negative_target_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            migrate_budgets.main(["--target", "-5"], store=make_store())

    def test_read_failure_is_fatal(self, capsys):
        store = make_store()
        store.fail_reads["managers"] = StoreReadError("boom", "managers")

        assert migrate_budgets.main(["--target", "10"], store=store) == 1
        assert "migration aborted" in capsys.readouterr().err

    def test_partial_failure(self):
        store = make_store()
        store.fail_writes["managers/alice"] = StoreWriteError("denied", "managers/alice")

        assert migrate_budgets.main(["--target", str(TARGET_BUDGET)], store=store) == 2

    def test_lost_connection_mid_sweep_is_fatal(self, capsys):
        store = make_store()
        store.fail_writes["managers/alice"] = StoreConnectionError("connection reset", "managers/alice")

        assert migrate_budgets.main(["--target", str(TARGET_BUDGET)], store=store) == 1
        assert "migration aborted" in capsys.readouterr().err


class TestAdminToolsScript:
    def test_add_budget_to_all(self, capsys):
        store = make_store()

        exit_code = admin_tools.main(["add-budget", "--amount", "1000000"], store=store)

        assert exit_code == 0
        assert "Updated: 3 managers" in capsys.readouterr().out
        assert store.snapshot()["managers"]["bob"]["budget"] == 901_000_000

    def test_add_budget_to_one_manager(self, capsys):
        store = make_store()

        exit_code = admin_tools.main(
            ["add-budget", "--amount", "1000000", "--manager", "carol@example.com"], store=store
        )

        assert exit_code == 0
        assert "New budget: $1201.0M" in capsys.readouterr().out
        assert store.snapshot()["managers"]["alice"]["budget"] == 500_000_000

    def test_add_budget_unknown_manager(self, capsys):
        exit_code = admin_tools.main(
            ["add-budget", "--amount", "1", "--manager", "nobody"], store=make_store()
        )

        assert exit_code == 1
        assert "manager_not_found" in capsys.readouterr().err

    def test_add_budget_rejects_zero(self):
        with pytest.raises(SystemExit):
            admin_tools.main(["add-budget", "--amount", "0"], store=make_store())

    def test_reset_points(self, capsys):
        store = make_store()

        exit_code = admin_tools.main(["reset-points"], store=store)

        assert exit_code == 0
        alice = store.snapshot()["managers"]["alice"]
        assert alice["points"] == 0
        assert alice["matchesPlayed"] == 7
        assert "loans" in store.snapshot()

    def test_command_required(self):
        with pytest.raises(SystemExit):
            admin_tools.main([], store=make_store())
