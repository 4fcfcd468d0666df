import uuid
from random import randint

import boto3
import pendulum
import pytest
from moto import mock_aws

from blog.models.post import Post, make_slug
from blog.settings import Settings


def pytest_configure():
    pytest.aws_default_region = "eu-central-1"
    pytest.jwt_secret = "6fl3AkTFmG2rVveLglUW8DOmp8J4Bvi3"


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def user_dict(faker) -> dict[str, str | None]:
    return {
        "id": str(uuid.uuid4()),
        "email": faker.email(),
        "role": "user",
        "username": faker.user_name(),
    }


@pytest.fixture
def other_user_dict(faker) -> dict[str, str | None]:
    return {
        "id": str(uuid.uuid4()),
        "email": faker.email(),
        "role": "user",
        "username": faker.user_name(),
    }


@pytest.fixture
def admin_user_dict(faker) -> dict[str, str | None]:
    return {
        "id": str(uuid.uuid4()),
        "email": faker.email(),
        "role": "admin",
        "username": faker.user_name(),
    }


@pytest.fixture
def dynamodb_resource(settings: Settings):
    with mock_aws():
        yield boto3.Session().resource(
            "dynamodb",
            region_name=pytest.aws_default_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
        )


@pytest.fixture
def initialize_posts_table(dynamodb_resource, posts: list[Post]):
    dynamodb_resource.create_table(
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        TableName="test-posts",
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        ProvisionedThroughput={"ReadCapacityUnits": 10, "WriteCapacityUnits": 10},
    )
    dynamodb_resource.create_table(
        AttributeDefinitions=[{"AttributeName": "slug", "AttributeType": "S"}],
        TableName="test-post-slugs",
        KeySchema=[{"AttributeName": "slug", "KeyType": "HASH"}],
        ProvisionedThroughput={"ReadCapacityUnits": 10, "WriteCapacityUnits": 10},
    )
    posts_table = dynamodb_resource.Table("test-posts")
    slugs_table = dynamodb_resource.Table("test-post-slugs")
    with posts_table.batch_writer() as batch:
        for post in posts:
            batch.put_item(Item=post.model_dump())
    with slugs_table.batch_writer() as batch:
        for post in posts:
            batch.put_item(Item={"slug": post.slug, "post_id": post.id})


@pytest.fixture
def make_post(faker):
    def make(
        author: str | None = None,
        created_at: pendulum.DateTime | None = None,
        **fields,
    ) -> Post:
        created_at = (created_at or pendulum.now("UTC")).to_iso8601_string()
        title = fields.pop("title", None) or f"{faker.sentence()} {uuid.uuid4().hex[:8]}"
        data = {
            "id": str(uuid.uuid4()),
            "title": title,
            "content": faker.text(),
            "author": author or str(uuid.uuid4()),
            "category": str(uuid.uuid4()),
            "slug": make_slug(title),
            "tags": faker.words(randint(1, 4)),
            "is_published": True,
            "views": 0,
            "excerpt": faker.sentence(),
            "featured_image": None,
            "created_at": created_at,
            "updated_at": created_at,
        }
        data.update(fields)
        return Post(**data)

    return make


@pytest.fixture
def posts(make_post, user_dict: dict[str, str | None]) -> list[Post]:
    now = pendulum.now("UTC")
    return [
        make_post(author=user_dict["id"], created_at=now.subtract(minutes=i))
        for i in range(10)
    ]


@pytest.fixture
def posts_table(dynamodb_resource):
    return dynamodb_resource.Table("test-posts")


@pytest.fixture
def slugs_table(dynamodb_resource):
    return dynamodb_resource.Table("test-post-slugs")
