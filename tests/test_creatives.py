"""
Tests for creative pairing
"""

import pytest
from unittest.mock import AsyncMock

from creative_studio import crud
from creative_studio.core.errors import ConflictError, NotFoundError, ValidationError
from creative_studio.db.models.creative import Creative
from creative_studio.db.models.headline import Headline
from creative_studio.db.models.image import Image
from creative_studio.services.creative_service import creative_service


@pytest.fixture
async def content(make_campaign, make_headlines, make_images):
    campaign = await make_campaign()
    headlines = await make_headlines(campaign, count=2)
    images = await make_images(campaign, count=2)
    return campaign, headlines, images


def _pair_payload(campaign, headline, image):
    return {"campaignId": campaign["id"], "headlineId": headline["id"], "imageId": image["id"]}


@pytest.mark.api
class TestCreatePair:
    """Tests for POST /api/creatives"""

    @pytest.mark.asyncio
    async def test_pair_success(self, client, api_helper, db, content):
        campaign, headlines, images = content

        response = await client.post("/api/creatives", json=_pair_payload(campaign, headlines[0], images[1]))

        creative = api_helper.assert_success(response)["creative"]
        assert creative["campaignId"] == campaign["id"]
        assert creative["headlineId"] == headlines[0]["id"]
        assert creative["imageId"] == images[1]["id"]
        assert creative["status"] == "active"
        assert await db.count(Creative) == 1

    @pytest.mark.asyncio
    async def test_duplicate_pair_conflicts(self, client, api_helper, db, content):
        campaign, headlines, images = content
        payload = _pair_payload(campaign, headlines[0], images[0])

        first = await client.post("/api/creatives", json=payload)
        second = await client.post("/api/creatives", json=payload)

        api_helper.assert_success(first)
        api_helper.assert_error(second, 400, "Creative pair already exists")
        assert await db.count(Creative) == 1

    @pytest.mark.asyncio
    async def test_same_headline_with_other_image_is_allowed(self, client, api_helper, db, content):
        campaign, headlines, images = content

        api_helper.assert_success(await client.post("/api/creatives", json=_pair_payload(campaign, headlines[0], images[0])))
        api_helper.assert_success(await client.post("/api/creatives", json=_pair_payload(campaign, headlines[0], images[1])))

        assert await db.count(Creative) == 2

    @pytest.mark.asyncio
    async def test_campaign_reported_before_headline(self, client, api_helper, content):
        _, _, images = content

        response = await client.post(
            "/api/creatives",
            json={"campaignId": "no-campaign", "headlineId": "no-headline", "imageId": images[0]["id"]},
        )

        api_helper.assert_error(response, 404, "Campaign not found")

    @pytest.mark.asyncio
    async def test_headline_reported_before_image(self, client, api_helper, content):
        campaign, _, _ = content

        response = await client.post(
            "/api/creatives",
            json={"campaignId": campaign["id"], "headlineId": "no-headline", "imageId": "no-image"},
        )

        api_helper.assert_error(response, 404, "Headline not found")

    @pytest.mark.asyncio
    async def test_missing_image(self, client, api_helper, content):
        campaign, headlines, _ = content

        response = await client.post(
            "/api/creatives",
            json={"campaignId": campaign["id"], "headlineId": headlines[0]["id"], "imageId": "no-image"},
        )

        api_helper.assert_error(response, 404, "Image not found")

    @pytest.mark.asyncio
    async def test_body_validation(self, client, api_helper):
        response = await client.post("/api/creatives", json={"campaignId": "c", "headlineId": "h"})
        api_helper.assert_error(response, 400, "imageId is required")

    @pytest.mark.asyncio
    async def test_race_past_existence_check_is_a_conflict(
        self, client, api_helper, db, content, monkeypatch
    ):
        campaign, headlines, images = content
        payload = _pair_payload(campaign, headlines[0], images[0])
        api_helper.assert_success(await client.post("/api/creatives", json=payload))

        # Simulate a concurrent request that checked before the first insert landed.
        monkeypatch.setattr(crud, "find_creative", AsyncMock(return_value=None))
        response = await client.post("/api/creatives", json=payload)

        api_helper.assert_error(response, 400, "Creative pair already exists")
        assert await db.count(Creative) == 1


@pytest.mark.api
class TestListPairs:
    """Tests for GET /api/creatives"""

    @pytest.mark.asyncio
    async def test_requires_campaign_id(self, client, api_helper):
        response = await client.get("/api/creatives")
        api_helper.assert_error(response, 400, "campaignId is required")

    @pytest.mark.asyncio
    async def test_lists_with_headline_and_image(self, client, api_helper, content):
        campaign, headlines, images = content
        await client.post("/api/creatives", json=_pair_payload(campaign, headlines[0], images[0]))
        await client.post("/api/creatives", json=_pair_payload(campaign, headlines[1], images[1]))

        response = await client.get("/api/creatives", params={"campaignId": campaign["id"]})

        creatives = api_helper.assert_success(response)["creatives"]
        assert len(creatives) == 2
        # newest first
        assert creatives[0]["headline"]["id"] == headlines[1]["id"]
        assert creatives[0]["image"]["id"] == images[1]["id"]
        assert creatives[1]["headline"]["text"] == headlines[0]["text"]
        assert creatives[1]["image"]["imageUrl"] == images[0]["imageUrl"]


@pytest.mark.api
class TestDeletePair:
    """Tests for DELETE /api/creatives/{id}"""

    @pytest.mark.asyncio
    async def test_delete_keeps_headline_and_image(self, client, api_helper, db, content):
        campaign, headlines, images = content
        created = api_helper.assert_success(
            await client.post("/api/creatives", json=_pair_payload(campaign, headlines[0], images[0]))
        )["creative"]

        response = await client.delete(f"/api/creatives/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Creative pair removed successfully"}
        assert await db.count(Creative) == 0
        headline = await db.get(Headline, headlines[0]["id"])
        image = await db.get(Image, images[0]["id"])
        assert headline.text == headlines[0]["text"]
        assert image.image_url == images[0]["imageUrl"]

    @pytest.mark.asyncio
    async def test_pair_can_be_recreated_after_delete(self, client, api_helper, content):
        campaign, headlines, images = content
        payload = _pair_payload(campaign, headlines[0], images[0])
        created = api_helper.assert_success(await client.post("/api/creatives", json=payload))["creative"]
        await client.delete(f"/api/creatives/{created['id']}")

        api_helper.assert_success(await client.post("/api/creatives", json=payload))

    @pytest.mark.asyncio
    async def test_unknown_id(self, client, api_helper):
        response = await client.delete("/api/creatives/unknown")
        api_helper.assert_error(response, 404, "Creative not found")

    @pytest.mark.asyncio
    async def test_missing_id(self, client, api_helper):
        response = await client.delete("/api/creatives")
        api_helper.assert_error(response, 400, "Creative ID is required")

    @pytest.mark.asyncio
    async def test_whitespace_id_is_looked_up(self, client, api_helper):
        response = await client.delete("/api/creatives/%20%20")
        api_helper.assert_error(response, 404, "Creative not found")


class TestCreativeService:

    @pytest.mark.asyncio
    async def test_unknown_everything_reports_campaign(self, session):
        with pytest.raises(NotFoundError, match="Campaign not found"):
            await creative_service.create_pair(session, "c", "h", "i")

    @pytest.mark.asyncio
    async def test_conflict_error_is_http_400(self):
        assert ConflictError("x").status_code == 400

    @pytest.mark.asyncio
    async def test_delete_rejects_only_empty_id(self, session):
        with pytest.raises(ValidationError, match="Creative ID is required"):
            await creative_service.delete_pair(session, "")
        with pytest.raises(NotFoundError, match="Creative not found"):
            await creative_service.delete_pair(session, "   ")
