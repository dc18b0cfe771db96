import io

import pytest
import requests

pytest.importorskip("PIL")
from PIL import Image

from plant_palette import images
from tests.conftest import make_plant


def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (8, 6), (22, 163, 74)).save(buf, "PNG")
    return buf.getvalue()


class FakeResponse:
    def __init__(self, content=b"", status=200):
        self.content = content
        self.status_code = status

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    """Answers by URL prefix; raises for anything mapped to an exception."""

    def __init__(self, routes):
        self.routes = routes
        self.requested = []

    def get(self, url, headers=None, timeout=None):
        self.requested.append(url)
        for prefix, answer in self.routes.items():
            if url.startswith(prefix):
                if isinstance(answer, Exception):
                    raise answer
                return answer
        raise AssertionError(f"unexpected url {url}")


PLANT = make_plant("fx", name="Wild Marjoram", scientific_name="Origanum vulgare")


def test_urls_are_built_from_names():
    assert images.image_url(PLANT) == (
        "https://tse2.mm.bing.net/th?q=Origanum%20vulgare%20Wild%20Marjoram%20plant&w=500&h=400&c=7&rs=1&p=0"
    )
    assert images.placeholder_url(PLANT) == "https://placehold.co/400x300/e2e8f0/475569?text=Wild%20Marjoram"


def test_search_image_used_when_it_loads():
    session = FakeSession({"https://tse2": FakeResponse(png_bytes())})
    url, data = images.resolve_image(PLANT, session)
    assert url == images.image_url(PLANT)
    assert data == png_bytes()


@pytest.mark.parametrize(
    "failure",
    [
        requests.ConnectionError("offline"),
        FakeResponse(status=404),
        FakeResponse(b"<html>not an image</html>"),
    ],
)
def test_placeholder_substituted_on_any_failure(failure):
    session = FakeSession({"https://tse2": failure, "https://placehold.co": FakeResponse(png_bytes())})
    url, data = images.resolve_image(PLANT, session)
    assert url == images.placeholder_url(PLANT)
    assert data is not None
    assert session.requested == [images.image_url(PLANT), images.placeholder_url(PLANT)]


def test_download_images_writes_jpegs(tmp_path):
    broken = make_plant("bx", name="Broken", scientific_name="Nulla imago")
    session = FakeSession({
        "https://tse2.mm.bing.net/th?q=Origanum": FakeResponse(png_bytes()),
        "https://tse2.mm.bing.net/th?q=Nulla": FakeResponse(status=500),
        "https://placehold.co": requests.Timeout("slow"),
    })
    sources = images.download_images([PLANT, broken], tmp_path / "img", session)
    assert sources == {"fx": images.image_url(PLANT), "bx": images.placeholder_url(broken)}
    assert (tmp_path / "img" / "origanum_vulgare.jpg").exists()
    assert not (tmp_path / "img" / "nulla_imago.jpg").exists()
