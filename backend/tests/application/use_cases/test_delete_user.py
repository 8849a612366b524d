"""Unit tests for DeleteUserUseCase."""

import pytest
from application.dtos import DeleteUserParam
from application.use_cases import DeleteUserUseCase
from domain.exceptions import NotFoundError
from domain.value_objects import UserId

from conftest import USER_ID


class TestDeleteUserUseCase:
    """Test user deletion."""

    @pytest.fixture
    def use_case(self, user_repository, mock_logger):
        return DeleteUserUseCase(user_repository, mock_logger)

    async def test_delete_passes_typed_id(self, use_case, user_repository):
        await use_case.execute(DeleteUserParam(user_id=USER_ID))
        user_repository.delete.assert_awaited_once_with(UserId.from_value(USER_ID))

    async def test_repository_not_found_propagates(self, use_case, user_repository, mock_logger):
        user_repository.delete.side_effect = NotFoundError("User", USER_ID)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteUserParam(user_id=USER_ID))

        assert mock_logger.error.call_args.args[0] == "Failed to delete user"
