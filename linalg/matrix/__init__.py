"""Dense float Matrix type, shape checks and matrix rank."""