import json

import pytest

from llmwire.fine_tunes import FineTuneEvent
from llmwire.fine_tuning_job import (
    FineTuningJob,
    FineTuningJobEvent,
    FineTuningJobEventList,
    FineTuningJobRequest,
    Hyperparameters,
    fine_tuning_job_events_path,
)

TEST_FINE_TUNING_JOB_ID = "fine-tuning-job-id"


def _sample_job():
    return FineTuningJob(
        object="fine_tuning.job",
        id=TEST_FINE_TUNING_JOB_ID,
        model="davinci-002",
        created_at=1692661014,
        finished_at=1692661190,
        fine_tuned_model="ft:davinci-002:my-org:custom_suffix:7q8mpxmy",
        organization_id="org-123",
        result_files=["file-abc123"],
        status="succeeded",
        validation_file="",
        training_file="file-abc123",
        hyperparameters=Hyperparameters(epochs="auto", learning_rate_multiplier="auto", batch_size="auto"),
        trained_tokens=5768,
    )


def test_job_round_trip_through_json():
    job = _sample_job()
    encoded = json.dumps(job.to_dict())
    assert FineTuningJob.from_dict(json.loads(encoded)) == job


def test_job_to_dict_leaves_out_empty_validation_file():
    body = _sample_job().to_dict()
    assert "validation_file" not in body
    assert body["hyperparameters"] == {"n_epochs": "auto", "learning_rate_multiplier": "auto", "batch_size": "auto"}
    assert body["trained_tokens"] == 5768


def test_empty_job_reply_gives_defaults():
    empty = FineTuningJob().to_dict()
    assert "fine_tuned_model" not in empty
    assert empty["hyperparameters"] == {}
    assert FineTuningJob.from_dict(empty) == FineTuningJob()


def test_request_to_dict():
    assert FineTuningJobRequest().to_dict() == {"training_file": ""}
    request = FineTuningJobRequest(
        training_file="file-abc123",
        model="gpt-3.5-turbo",
        hyperparameters=Hyperparameters(epochs=3),
        suffix="custom",
    )
    assert request.to_dict() == {
        "training_file": "file-abc123",
        "model": "gpt-3.5-turbo",
        "hyperparameters": {"n_epochs": 3},
        "suffix": "custom",
    }


def test_event_list_from_dict():
    events = FineTuningJobEventList.from_dict(
        {
            "object": "list",
            "data": [{"object": "fine_tuning.job.event", "created_at": 1, "level": "info", "message": "started"}],
            "has_more": True,
        }
    )
    assert events.has_more is True
    assert events.data == [FineTuneEvent(object="fine_tuning.job.event", created_at=1, level="info", message="started")]
    assert FineTuningJobEventList.from_dict({}) == FineTuningJobEventList()


def test_event_from_dict():
    event = FineTuningJobEvent.from_dict(
        {"object": "fine_tuning.job.event", "id": "ev-1", "created_at": 5, "level": "info",
         "message": "step", "data": {"step": 1}, "type": "metrics"}
    )
    assert event == FineTuningJobEvent(
        object="fine_tuning.job.event", id="ev-1", created_at=5, level="info",
        message="step", data={"step": 1}, type="metrics",
    )


@pytest.mark.parametrize(
    ("after", "limit", "expected"),
    [
        (None, None, "/fine_tuning/jobs/fine-tuning-job-id/events"),
        ("last-event-id", None, "/fine_tuning/jobs/fine-tuning-job-id/events?after=last-event-id"),
        (None, 10, "/fine_tuning/jobs/fine-tuning-job-id/events?limit=10"),
        ("last-event-id", 10, "/fine_tuning/jobs/fine-tuning-job-id/events?after=last-event-id&limit=10"),
    ],
)
def test_events_path(after, limit, expected):
    assert fine_tuning_job_events_path(TEST_FINE_TUNING_JOB_ID, after, limit) == expected