from moodels.assets import ResourceHandles


def test_empty_is_done():
    assert ResourceHandles().is_all_done() is True


def test_request_makes_it_not_done():
    handles = ResourceHandles()
    handles.request("music", lambda h: None)
    assert handles.is_all_done() is False


def test_unloaded_handle_stays_waiting():
    inserted = []
    handles = ResourceHandles()
    handles.request("music", inserted.append)
    done = handles.poll(lambda h: False)
    assert done == []
    assert inserted == []
    assert handles.is_all_done() is False
    assert handles.finished == []


def test_loaded_handle_is_inserted_and_finished():
    inserted = []
    handles = ResourceHandles()
    handles.request("music", inserted.append)
    done = handles.poll(lambda h: True)
    assert done == ["music"]
    assert inserted == ["music"]
    assert handles.finished == ["music"]
    assert handles.is_all_done() is True


def test_mixed_loading_keeps_order_and_retries():
    inserted = []
    handles = ResourceHandles()
    for name in ("a", "b", "c"):
        handles.request(name, inserted.append)
    ready = {"a", "c"}
    assert handles.poll(lambda h: h in ready) == ["a", "c"]
    assert [h for h, _ in handles.waiting] == ["b"]
    ready.add("b")
    assert handles.poll(lambda h: h in ready) == ["b"]
    assert inserted == ["a", "c", "b"]
    assert handles.finished == ["a", "c", "b"]
    assert handles.is_all_done() is True


def test_finished_handle_not_inserted_twice():
    inserted = []
    handles = ResourceHandles()
    handles.request("font", inserted.append)
    handles.poll(lambda h: True)
    handles.poll(lambda h: True)
    assert inserted == ["font"]