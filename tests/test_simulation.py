import pytest

from frostdkg import simulation, util
from frostdkg.__main__ import main


def test_default_threshold():
    assert simulation.default_threshold(1) == 1
    assert simulation.default_threshold(3) == 2
    assert simulation.default_threshold(4) == 2
    assert simulation.default_threshold(5) == 3


def test_honest_round(num_participants, threshold):
    result = simulation.run_simulated_dkg(num_participants, threshold, 'simulation-tests')

    assert sorted(result.key_pairs) == list(range(1, num_participants + 1))
    assert all(rejected == () for rejected in result.rejected.values())
    assert len(set(kp.group_public for kp in result.key_pairs.values())) == 1
    assert len(set(kp.secret for kp in result.key_pairs.values())) == num_participants


def test_round_with_corrupt_dealer(num_participants, threshold):
    result = simulation.run_simulated_dkg(num_participants, threshold, 'simulation-tests', corrupt_dealers=(2,))

    honest = {index: kp for index, kp in result.key_pairs.items() if index != 2}
    for index in honest:
        assert result.rejected[index] == (2,)
    assert result.rejected[2] == ()
    assert len(set(kp.group_public for kp in honest.values())) == 1
    assert result.key_pairs[2].group_public != result.key_pairs[1].group_public


def test_corrupt_dealer_must_be_a_participant():
    with pytest.raises(ValueError):
        simulation.run_simulated_dkg(3, 2, corrupt_dealers=(4,))


def test_main_prints_group_key(capsys):
    assert main(['--num-participants', '3', '--threshold', '2', '--corrupt', '3']) == 0
    out = capsys.readouterr().out.strip()
    util.hex_to_curve_point(out)


def test_main_reports_aborted_round(capsys):
    assert main(['--num-participants', '2', '--threshold', '3']) == 1
    assert capsys.readouterr().out == ''


def test_main_reports_round_without_honest_participants(caplog):
    assert main(['--num-participants', '2', '--threshold', '1', '--corrupt', '1', '--corrupt', '2']) == 1
    assert 'no honest participants remain' in caplog.text
    assert 'disagree' not in caplog.text
