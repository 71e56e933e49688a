"""Tests for photo blob naming."""

import uuid

import pytest

from offices.domain.policies.photo_naming import new_upload_id, photo_blob_name

OFFICE_ID = uuid.UUID("3f2504e0-4f89-11d3-9a0c-0305e82c3301")


def test_name_includes_office_id_upload_id_and_filename():
    assert photo_blob_name(OFFICE_ID, "front.png", "ab12") == f"{OFFICE_ID}_ab12_front.png"


def test_name_without_upload_id():
    assert photo_blob_name(OFFICE_ID, "front.png") == f"{OFFICE_ID}_front.png"


@pytest.mark.parametrize("filename", [None, "", "   "])
def test_name_without_filename(filename):
    assert photo_blob_name(OFFICE_ID, filename) == str(OFFICE_ID)
    assert photo_blob_name(OFFICE_ID, filename, "ab12") == f"{OFFICE_ID}_ab12"


@pytest.mark.parametrize(
    "filename",
    ["/home/user/front.png", "../../front.png", r"C:\Users\me\front.png"],
)
def test_client_path_is_stripped(filename):
    assert photo_blob_name(OFFICE_ID, filename) == f"{OFFICE_ID}_front.png"


def test_nul_bytes_are_dropped():
    assert photo_blob_name(OFFICE_ID, "fr\x00ont.png") == f"{OFFICE_ID}_front.png"


def test_same_file_uploaded_twice_gets_distinct_names():
    first = photo_blob_name(OFFICE_ID, "front.png", new_upload_id())
    second = photo_blob_name(OFFICE_ID, "front.png", new_upload_id())
    assert first != second
