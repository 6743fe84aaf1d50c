"""Service layer: one service per command, all returning ServiceResult."""
