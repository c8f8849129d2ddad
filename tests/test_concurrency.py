import pytest

from rustlings.lessons.concurrency import JobStatus, offset_sums, run_jobs


def test_run_jobs_completes_all():
    status = run_jobs(3, 0.01, 0.005)
    assert status.jobs_completed == 3


def test_run_jobs_reports_waiting(capsys):
    run_jobs(2, 0.02, 0.005)
    assert "waiting... " in capsys.readouterr().out


def test_run_jobs_with_no_jobs(capsys):
    status = run_jobs(0, 0.01, 0.01)
    assert status.jobs_completed == 0
    assert "waiting" not in capsys.readouterr().out


def test_run_jobs_rejects_negative_total():
    with pytest.raises(ValueError):
        run_jobs(-1, 0.01, 0.01)


def test_job_status_starts_at_zero():
    assert JobStatus().jobs_completed == 0


def test_offset_sums_cover_every_number():
    numbers = list(range(100))
    sums = offset_sums(numbers, 8)
    assert len(sums) == 8
    assert sum(sums) == sum(numbers)


def test_offset_sums_first_offset():
    assert offset_sums(list(range(100)), 8)[0] == 624


def test_offset_sums_small_example():
    assert offset_sums([1, 2, 3, 4], 2) == [4, 6]


def test_offset_sums_prints_each_offset(capsys):
    offset_sums(list(range(100)), 8)
    output = capsys.readouterr().out
    assert all(f"Sum of offset {offset} is" in output for offset in range(8))


def test_offset_sums_needs_a_worker():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], 0)