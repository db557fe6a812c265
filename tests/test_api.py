"""End-to-end tests of the HTTP API against an in-memory database."""

import pytest
from httpx import ASGITransport, AsyncClient

from color_diary_api.db.session import get_db
from color_diary_api.deps import get_stats_refresher
from color_diary_api.main import ERROR_STATUS_CODES, app


@pytest.fixture
async def client(session_factory, refresher):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_stats_refresher] = lambda: refresher
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def save(client):
    async def _save(day, color_hex, notes=None):
        response = await client.post("/api/entries", json={"date": day, "colorHex": color_hex, "notes": notes})
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _save


class TestHealth:
    """Service endpoints."""

    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["pendingStatsRefreshes"] == 0

    async def test_root(self, client):
        response = await client.get("/")
        assert response.json()["health"] == "/health"


class TestEntriesApi:
    """Committing and reading daily colors."""

    async def test_save_and_read_back(self, client, save, refresher):
        data = await save("2024-06-10", "#ff3b30", "Busy day")

        assert data["date"] == "2024-06-10"
        assert data["colorHex"]["hex"] == "#FF3B30"
        assert data["moodScore"] == 9
        assert refresher.pending == 1

        response = await client.get("/api/entries/2024-06-10")
        assert response.status_code == 200
        assert response.json()["data"]["notes"] == "Busy day"

    async def test_missing_entry(self, client):
        response = await client.get("/api/entries/2024-06-10")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"

    async def test_malformed_color_is_rejected(self, client):
        response = await client.post("/api/entries", json={"date": "2024-06-10", "colorHex": "#XYZXYZ"})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "REQUEST_VALIDATION_ERROR"
        assert error["details"]["errors"][0]["loc"] == ["body", "colorHex"]

    async def test_unknown_route_uses_the_envelope(self, client):
        response = await client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "HTTP_ERROR"

    async def test_list_range(self, client, save):
        for day in ("2024-06-09", "2024-06-10", "2024-06-11"):
            await save(day, "#34C759")

        response = await client.get("/api/entries", params={"start": "2024-06-10", "end": "2024-06-30"})
        assert [entry["date"] for entry in response.json()["data"]] == ["2024-06-11", "2024-06-10"]

    async def test_reversed_range(self, client):
        response = await client.get("/api/entries", params={"start": "2024-06-10", "end": "2024-06-01"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestColorsApi:
    """Palette and single-color analysis."""

    async def test_palette(self, client):
        data = (await client.get("/api/colors/palette")).json()["data"]

        assert [entry["key"] for entry in data][:3] == ["red", "blue", "yellow"]
        assert len(data) == 10
        assert data[0]["hex"]["hex"] == "#FF3B30"

    async def test_analyze(self, client):
        response = await client.get("/api/colors/analyze", params={"hex": "#0000ff"})
        data = response.json()["data"]

        assert data["colorKey"] == "blue"
        assert data["hex"] == "#0000FF"
        assert data["warmth"] == "cool"

    async def test_analyze_malformed(self, client):
        response = await client.get("/api/colors/analyze", params={"hex": "blue"})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "PARSE_ERROR"

    async def test_analyze_rejects_trailing_newline(self, client):
        response = await client.get("/api/colors/analyze", params={"hex": "#FF3B30\n"})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "PARSE_ERROR"
        assert response.json()["error"]["details"] == {"value": "#FF3B30\n"}

    async def test_wheel(self, client):
        response = await client.get("/api/colors/wheel", params={"angle": 0, "distance": 1})
        assert response.json()["data"]["hex"] == "#FF0000"

    async def test_wheel_distance_out_of_range(self, client):
        response = await client.get("/api/colors/wheel", params={"angle": 0, "distance": 2})
        assert response.status_code == 422


class TestAnalysisApi:
    """Aggregates computed for an explicit reference date."""

    async def test_empty_diary(self, client):
        params = {"asOf": "2024-06-15"}

        mixture = (await client.get("/api/analysis/mixture", params=params)).json()["data"]
        assert mixture["mixture"] is None
        assert mixture["period"] == "all"

        assert (await client.get("/api/analysis/trend", params=params)).json()["data"] is None
        assert (await client.get("/api/analysis/overview", params=params)).json()["data"] is None

        frequency = (await client.get("/api/analysis/frequency", params=params)).json()["data"]
        assert frequency["counts"] == {}
        assert frequency["dominantColor"] is None

    async def test_weekly_mixture_window(self, client, save):
        await save("2024-06-09", "#007AFF")  # Sunday of the previous week
        await save("2024-06-10", "#FF3B30")

        response = await client.get("/api/analysis/mixture", params={"period": "weekly", "asOf": "2024-06-15"})
        data = response.json()["data"]

        assert data["start"] == "2024-06-10"
        assert data["end"] == "2024-06-15"
        assert data["mixture"]["totalEntries"] == 1
        assert data["mixture"]["mixedColor"]["hex"] == "#FF3B30"
        assert data["mixture"]["dominantWarmth"] == "warm"

    async def test_trend_and_frequency(self, client, save):
        for day in range(9, 16):
            await save(f"2024-06-{day:02d}", "#FFFFFF" if day < 13 else "#FFCC00")

        trend = (await client.get("/api/analysis/trend", params={"asOf": "2024-06-15"})).json()["data"]
        assert trend["trendDirection"] == "increasing"
        assert trend["scoreRange"] == {"min": 2, "max": 8}

        frequency = (await client.get("/api/analysis/frequency", params={"asOf": "2024-06-15", "top": 1})).json()
        assert frequency["data"]["counts"] == {"yellow": 3, "white": 4}
        assert frequency["data"]["topColors"] == [{"key": "white", "count": 4}]

    async def test_entries_after_reference_date_are_ignored(self, client, save):
        await save("2024-06-14", "#34C759")
        await save("2024-06-20", "#FF3B30")

        overview = (await client.get("/api/analysis/overview", params={"asOf": "2024-06-15"})).json()["data"]
        assert overview["totalDays"] == 1
        assert overview["frequency"]["dominantColor"] == "green"
        assert len(overview["weekdayPattern"]) == 7


class TestStatsApi:
    """Persisted and live statistics."""

    async def test_weekly_stats_after_refresh(self, client, save, refresher):
        await save("2024-06-10", "#FF3B30")
        await save("2024-06-11", "#007AFF")

        refresher.start()
        await refresher.join()
        await refresher.stop()

        weekly = (await client.get("/api/stats/weekly", params={"date": "2024-06-15"})).json()["data"]
        assert weekly["weekStart"] == "2024-06-10"
        assert weekly["totalEntries"] == 2

        monthly = (await client.get("/api/stats/monthly", params={"month": "2024-06"})).json()["data"]
        assert monthly["dominantColors"] == ["red", "blue"]

    async def test_month_summary_and_usage(self, client, save):
        await save("2024-06-01", "#007AFF")
        await save("2024-06-02", "#FF3B30")

        summary = (await client.get("/api/stats/month-summary", params={"month": "2024-06"})).json()["data"]
        assert summary == {"totalDays": 2, "averageScore": 7, "dominantColor": "red", "colorVariety": 2}

        usage = (await client.get("/api/stats/usage", params={"asOf": "2024-06-11"})).json()["data"]
        assert usage["completionRate"] == 20
        assert usage["startDate"] == "2024-06-01"

    async def test_invalid_month(self, client):
        response = await client.get("/api/stats/month-summary", params={"month": "2024-13"})
        assert response.status_code == 400


class TestPreferencesApi:
    """Key/value settings."""

    async def test_put_and_get(self, client):
        response = await client.put("/api/preferences/notificationTime", json={"value": "21:00"})
        assert response.json()["data"] == {"key": "notificationTime", "value": "21:00"}

        response = await client.get("/api/preferences/notificationTime")
        assert response.json()["data"]["value"] == "21:00"

    async def test_unset(self, client):
        response = await client.get("/api/preferences/notifications")
        assert response.json()["data"]["value"] is None


class TestReportApi:
    """PDF download."""

    async def test_weekly_report(self, client, save):
        await save("2024-06-10", "#FF3B30")

        response = await client.get("/api/report/weekly", params={"asOf": "2024-06-15"})

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert "color_diary_report_2024-06-15.pdf" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")


class TestErrorMapping:
    """Exception codes to HTTP statuses."""

    def test_status_codes(self):
        assert ERROR_STATUS_CODES == {"NOT_FOUND": 404, "VALIDATION_ERROR": 400, "PARSE_ERROR": 422}
