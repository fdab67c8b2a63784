from moodels.animation import (
    IDLE_FRAMES,
    IDLE_INTERVAL,
    WALKING_FRAMES,
    WALKING_INTERVAL,
    AnimationState,
    PlayerAnimation,
)


def test_new_animation_is_idle_at_first_frame():
    anim = PlayerAnimation()
    assert anim.state is AnimationState.IDLING
    assert anim.frame == 0
    assert anim.atlas_index() == 0


def test_short_tick_does_not_advance():
    anim = PlayerAnimation()
    anim.update_timer(IDLE_INTERVAL / 2)
    assert anim.frame == 0
    assert anim.changed() is False


def test_idle_frames_wrap():
    anim = PlayerAnimation()
    anim.update_timer(IDLE_INTERVAL)
    assert anim.frame == 1
    assert anim.changed() is True
    for _ in range(IDLE_FRAMES - 1):
        anim.update_timer(IDLE_INTERVAL)
    assert anim.frame == 0


def test_walking_atlas_index_is_offset():
    anim = PlayerAnimation()
    anim.update_state(AnimationState.WALKING)
    anim.update_timer(WALKING_INTERVAL)
    assert anim.frame == 1
    assert anim.atlas_index() == 6 + anim.frame


def test_switching_state_restarts():
    anim = PlayerAnimation.walking()
    anim.update_timer(WALKING_INTERVAL)
    anim.update_timer(WALKING_INTERVAL)
    anim.update_state(AnimationState.IDLING)
    assert anim.state is AnimationState.IDLING
    assert anim.frame == 0
    assert anim.timer.duration == IDLE_INTERVAL


def test_same_state_keeps_progress():
    anim = PlayerAnimation.walking()
    anim.update_timer(WALKING_INTERVAL)
    anim.update_state(AnimationState.WALKING)
    assert anim.frame == 1


def test_walking_cycle_wraps_after_all_frames():
    anim = PlayerAnimation.walking()
    frames = []
    for _ in range(WALKING_FRAMES):
        anim.update_timer(WALKING_INTERVAL)
        frames.append(anim.frame)
    assert anim.frame == 0
    assert sorted(frames) == list(range(WALKING_FRAMES))


def test_step_frames_while_walking():
    anim = PlayerAnimation.walking()
    steps = []
    for _ in range(WALKING_FRAMES):
        anim.update_timer(WALKING_INTERVAL)
        if anim.is_step_frame():
            steps.append(anim.frame)
    assert steps == [2, 5]


def test_no_step_while_idle():
    anim = PlayerAnimation()
    results = []
    for _ in range(4):
        anim.update_timer(IDLE_INTERVAL)
        results.append(anim.is_step_frame())
    assert results == [False] * 4