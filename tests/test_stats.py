import io

from mdbkit.stats import Statistics


def test_reads_not_counted_until_started():
    stats = Statistics()
    stats.record_read()
    assert stats.pg_reads == 0


def test_counting_between_start_and_stop():
    stats = Statistics()
    stats.start()
    for _ in range(5):
        stats.record_read()
    stats.stop()
    stats.record_read()
    assert stats.pg_reads == 5
    assert stats.collect is False


def test_restart_keeps_count():
    stats = Statistics()
    stats.start()
    stats.record_read()
    stats.stop()
    stats.start()
    stats.record_read()
    assert stats.pg_reads == 2


def test_dump_to_stream():
    stats = Statistics(collect=True, pg_reads=7)
    out = io.StringIO()
    stats.dump(out)
    assert out.getvalue() == "Physical Page Reads: 7\n"


def test_dump_defaults_to_stdout(capsys):
    stats = Statistics()
    stats.start()
    stats.record_read()
    stats.dump()
    assert capsys.readouterr().out == "Physical Page Reads: 1\n"