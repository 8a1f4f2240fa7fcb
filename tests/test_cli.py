"""
Command line tests: single prediction and labelled sample evaluation
"""

import json

import numpy as np
import pytest

from emotion_detection import run
from emotion_detection.cli import evaluate_samples
from emotion_detection.samples import LABELLED_SAMPLES, SAMPLE_TEXTS


class TestRunCli:
    """emotion_detection.run"""

    def test_prints_formatted_json(self, capsys):
        run.main(["--text", "I am so happy today!", "--seed", "3"])
        out = json.loads(capsys.readouterr().out)
        assert "original_emotions" in out

    def test_seed_makes_output_reproducible(self, capsys):
        run.main(["--text", "I feel great", "--seed", "9"])
        first = capsys.readouterr().out
        run.main(["--text", "I feel great", "--seed", "9"])
        assert capsys.readouterr().out == first

    def test_blank_text_prints_error(self, capsys):
        run.main(["--text", " "])
        out = json.loads(capsys.readouterr().out)
        assert out["status_code"] == 400


class TestEvaluateSamples:
    """emotion_detection.cli.evaluate_samples"""

    def test_samples_are_defined(self):
        assert len(SAMPLE_TEXTS) == 5
        assert ("", None) in LABELLED_SAMPLES

    def test_evaluate_reports_hit_rates(self):
        df = evaluate_samples.evaluate(LABELLED_SAMPLES, trials=20, rng=np.random.default_rng(0))
        assert list(df.columns) == ["text", "expected", "most_common", "hit_rate"]
        assert len(df) == len(LABELLED_SAMPLES)
        assert df["hit_rate"].between(0.0, 1.0).all()
        rates = dict(zip(df["text"], df["hit_rate"]))
        assert rates[""] == 1.0
        assert rates["I am so happy today!"] >= 0.8

    def test_main_writes_csv(self, tmp_path, capsys):
        out_path = tmp_path / "results.csv"
        evaluate_samples.main(["--trials", "5", "--seed", "1", "--csv-out", str(out_path)])
        assert out_path.exists()
        assert "Mean hit rate" in capsys.readouterr().out

    def test_main_rejects_zero_trials(self):
        with pytest.raises(SystemExit) as exc:
            evaluate_samples.main(["--trials", "0"])
        assert exc.value.code == 1


class TestApiScripts:
    """emotion_detection.cli.api_local_test and api_post_test"""

    def test_local_client_posts_every_sample(self, capsys):
        from emotion_detection.cli import api_local_test

        api_local_test.main()
        out = capsys.readouterr().out
        assert out.count('"status_code": 200') == len(SAMPLE_TEXTS)
        assert '"status_code": 400' in out

    def test_remote_client_posts_every_sample(self, monkeypatch, capsys):
        import httpx

        from emotion_detection.cli import api_post_test

        seen = []

        def handler(request):
            seen.append(json.loads(request.content))
            return httpx.Response(200, json={"original_emotions": {}, "expanded_emotions": {}})

        real_client = httpx.Client
        monkeypatch.setattr(
            api_post_test.httpx, "Client",
            lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
        )
        api_post_test.main()
        assert [p["text"] for p in seen] == SAMPLE_TEXTS
        assert "original_emotions" in capsys.readouterr().out
