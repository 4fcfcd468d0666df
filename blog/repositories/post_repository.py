from typing import Any

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, ConditionBase, Key
from botocore.exceptions import ClientError

from blog import settings

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


def _is_conditional_check_failed(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == CONDITIONAL_CHECK_FAILED


class PostRepository:
    def __init__(self):
        self._logger = Logger(utc=True)
        dynamodb = boto3.resource("dynamodb", region_name=settings.aws_region)
        self._table = dynamodb.Table(f"{settings.stage}-posts")
        self._slugs_table = dynamodb.Table(f"{settings.stage}-post-slugs")

    def reserve_slug(self, slug: str, post_uuid: str) -> bool:
        try:
            self._slugs_table.put_item(
                Item={"slug": slug, "post_id": post_uuid},
                ConditionExpression=Attr("slug").not_exists(),
            )
        except ClientError as err:
            if _is_conditional_check_failed(err):
                self._logger.info(f"Slug is already taken {slug=}")
                return False
            raise
        return True

    def release_slug(self, slug: str):
        self._slugs_table.delete_item(Key={"slug": slug})

    def create_post(self, data: dict[str, Any]):
        self._table.put_item(
            Item=data, ConditionExpression=Attr("id").not_exists()
        )

    def get_all_posts(self, filter_expression: ConditionBase) -> list[dict[str, Any]]:
        items = []
        response = self._table.scan(FilterExpression=filter_expression)
        items.extend(response["Items"])
        while "LastEvaluatedKey" in response:
            response = self._table.scan(
                ExclusiveStartKey=response["LastEvaluatedKey"],
                FilterExpression=filter_expression,
            )
            items.extend(response["Items"])
        return items

    def get_post_by_uuid(self, post_uuid: str) -> dict[str, Any] | None:
        response = self._table.query(KeyConditionExpression=Key("id").eq(post_uuid))
        return response["Items"][0] if response["Items"] else None

    def increment_views(self, post_uuid: str) -> dict[str, Any] | None:
        try:
            response = self._table.update_item(
                Key={"id": post_uuid},
                ConditionExpression=Attr("id").exists(),
                UpdateExpression="ADD #views :one",
                ExpressionAttributeNames={"#views": "views"},
                ExpressionAttributeValues={":one": 1},
                ReturnValues="ALL_NEW",
            )
        except ClientError as err:
            if _is_conditional_check_failed(err):
                return None
            raise
        return response["Attributes"]

    def update_post(
        self, post_uuid: str, data: dict[str, Any]
    ) -> dict[str, Any] | None:
        attr_names = {f"#{k}": k for k in data}
        attr_values = {f":{k}": v for k, v in data.items()}
        update_expr = ", ".join(f"#{k}=:{k}" for k in data)
        try:
            response = self._table.update_item(
                Key={"id": post_uuid},
                ConditionExpression=Attr("id").exists(),
                UpdateExpression=f"SET {update_expr}",
                ExpressionAttributeNames=attr_names,
                ExpressionAttributeValues=attr_values,
                ReturnValues="ALL_NEW",
            )
        except ClientError as err:
            if _is_conditional_check_failed(err):
                return None
            raise
        return response["Attributes"]

    def delete_post(self, post_uuid: str) -> dict[str, Any] | None:
        try:
            response = self._table.delete_item(
                Key={"id": post_uuid},
                ConditionExpression=Attr("id").exists(),
                ReturnValues="ALL_OLD",
            )
        except ClientError as err:
            if _is_conditional_check_failed(err):
                return None
            raise
        return response.get("Attributes")
