"""Tests for UploadCoordinator retry budget."""
from unittest.mock import Mock, patch

import pytest

from fbgraph.core.config import RetryConfig
from fbgraph.core.file import GraphVideo
from fbgraph.core.api.errors import ResumableUploadError, ServerError
from fbgraph.core.upload import (
    ResumableUploader,
    UploadCoordinator,
    UploadResult,
    ExponentialBackoffStrategy,
    TransferBudget,
)

from fakes import FakeUploadTransport

ENDPOINT = '/me/videos'
START = {'video_id': '1337', 'start_offset': '0', 'end_offset': '20', 'upload_session_id': '42'}


def resumable(start=None, end=None):
    return ResumableUploadError(None, 'There was a problem uploading your video. Please try again.', 6000,
                                start_offset=start, end_offset=end)


@pytest.fixture
def video(video_file):
    return GraphVideo(video_file)


def coordinator_with(*script, retry_strategy=None):
    transport = FakeUploadTransport(script)
    uploader = ResumableUploader(transport=transport)
    return UploadCoordinator(uploader, retry_strategy=retry_strategy), uploader, transport


def phases(transport):
    return [call['params']['upload_phase'] for call in transport.calls]


class TestTransferBudget:
    """Test suite for TransferBudget."""

    def test_rejects_zero_tries(self):
        with pytest.raises(ValueError):
            TransferBudget(0)

    def test_last_try_allows_throw(self):
        budget = TransferBudget(2)

        assert budget.allow_throw is False
        budget.consume()
        assert budget.allow_throw is True
        assert budget.retries == 1

    def test_single_try_always_throws(self):
        assert TransferBudget(1).allow_throw is True

    def test_reset(self):
        budget = TransferBudget(3)
        budget.consume()
        budget.consume()

        budget.reset()

        assert budget.remaining == 3
        assert budget.retries == 0


class TestUploadResumable:
    """Test suite for the full upload loop."""

    def test_happy_path(self, video):
        """Test start, two transfers and finish."""
        coordinator, _, transport = coordinator_with(
            dict(START),
            {'start_offset': '20', 'end_offset': '40'},
            {'start_offset': '40', 'end_offset': '50'},
            {'start_offset': '50', 'end_offset': '50'},
            {'success': True},
        )

        result = coordinator.upload_resumable(ENDPOINT, video, {'title': 'Cats'})

        assert result == UploadResult(video_id='1337', success=True)
        assert phases(transport) == ['start', 'transfer', 'transfer', 'transfer', 'finish']
        assert [c['params'].get('start_offset') for c in transport.calls[1:4]] == [0, 20, 40]
        assert transport.calls[-1]['params'] == {
            'title': 'Cats',
            'upload_phase': 'finish',
            'upload_session_id': '42',
        }

    def test_always_failing_transfer_stops_after_max_tries(self, video):
        """Test three failures with max_tries=3 propagate on the third attempt."""
        coordinator, uploader, transport = coordinator_with(dict(START), resumable(), resumable(), resumable())

        with patch.object(uploader, 'attempt_transfer', wraps=uploader.attempt_transfer) as attempt:
            with pytest.raises(ResumableUploadError):
                coordinator.upload_resumable(ENDPOINT, video, max_tries=3)

        assert phases(transport) == ['start', 'transfer', 'transfer', 'transfer']
        assert [c.kwargs['allow_throw'] for c in attempt.call_args_list] == [False, False, True]

    def test_single_try_throws_first_failure(self, video):
        coordinator, _, transport = coordinator_with(dict(START), resumable())

        with pytest.raises(ResumableUploadError):
            coordinator.upload_resumable(ENDPOINT, video, max_tries=1)

        assert phases(transport) == ['start', 'transfer']

    def test_retry_then_success(self, video):
        """Test a retried chunk is resent with the same range."""
        coordinator, _, transport = coordinator_with(
            dict(START),
            resumable(),
            {'start_offset': '20', 'end_offset': '50'},
            {'start_offset': '50', 'end_offset': '50'},
            {'success': True},
        )

        result = coordinator.upload_resumable(ENDPOINT, video, max_tries=2)

        assert result.success is True
        assert [c['params'].get('start_offset') for c in transport.calls[1:4]] == [0, 0, 20]

    def test_progress_restores_budget(self, video):
        """Test each new chunk gets the full number of tries."""
        coordinator, _, transport = coordinator_with(
            dict(START),
            resumable(),
            {'start_offset': '20', 'end_offset': '50'},
            resumable(),
            {'start_offset': '50', 'end_offset': '50'},
            {'success': True},
        )

        result = coordinator.upload_resumable(ENDPOINT, video, max_tries=2)

        assert result.video_id == '1337'
        assert phases(transport).count('transfer') == 4

    def test_corrected_range_is_followed(self, video):
        """Test Graph's corrected range becomes the next chunk."""
        coordinator, _, transport = coordinator_with(
            dict(START),
            resumable(40, 50),
            {'start_offset': '50', 'end_offset': '50'},
            {'success': True},
        )

        coordinator.upload_resumable(ENDPOINT, video, max_tries=2)

        second = transport.calls[2]['params']
        assert second['start_offset'] == 40
        assert second['video_file_chunk'].get_contents() == bytes(range(40, 50))

    def test_corrected_range_on_last_try_propagates(self, video):
        """Test a ranged error on the final attempt is raised, not followed."""
        coordinator, _, transport = coordinator_with(dict(START), resumable(40, 50))

        with pytest.raises(ResumableUploadError) as exc_info:
            coordinator.upload_resumable(ENDPOINT, video, max_tries=1)

        assert exc_info.value.start_offset == 40
        assert phases(transport) == ['start', 'transfer']

    def test_non_resumable_error_propagates_immediately(self, video):
        coordinator, _, transport = coordinator_with(dict(START), ServerError(None, 'Down', 1))

        with pytest.raises(ServerError):
            coordinator.upload_resumable(ENDPOINT, video, max_tries=5)

        assert phases(transport) == ['start', 'transfer']

    def test_empty_first_range_goes_straight_to_finish(self, video):
        coordinator, _, transport = coordinator_with(
            dict(START, start_offset='0', end_offset='0'),
            {'success': True},
        )

        coordinator.upload_resumable(ENDPOINT, video)

        assert phases(transport) == ['start', 'finish']

    def test_invalid_max_tries(self, video):
        coordinator, _, transport = coordinator_with(dict(START))

        with pytest.raises(ValueError):
            coordinator.upload_resumable(ENDPOINT, video, max_tries=0)

        assert transport.calls == []

    def test_retry_strategy_waits_between_retries(self, video):
        strategy = Mock()
        coordinator, _, _ = coordinator_with(
            dict(START),
            resumable(),
            resumable(),
            {'start_offset': '50', 'end_offset': '50'},
            {'success': True},
            retry_strategy=strategy,
        )

        coordinator.upload_resumable(ENDPOINT, video, max_tries=3)

        assert [c.args for c in strategy.wait.call_args_list] == [(0,), (1,)]


class TestExponentialBackoffStrategy:
    """Test suite for ExponentialBackoffStrategy."""

    def test_no_delay_by_default(self):
        sleep = Mock()

        ExponentialBackoffStrategy(sleep=sleep).wait(3)

        sleep.assert_not_called()

    def test_exponential_delay(self):
        sleep = Mock()
        strategy = ExponentialBackoffStrategy(RetryConfig(base_delay=0.5, max_delay=1.5), sleep=sleep)

        strategy.wait(0)
        strategy.wait(1)
        strategy.wait(5)

        assert [c.args[0] for c in sleep.call_args_list] == [0.5, 1.0, 1.5]
