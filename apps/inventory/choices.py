from django.db import models


# Valor de la opción "None" en todos los selectores
NONE_OPTION = ""


class PackagingType(models.TextChoices):
    BOTTLE = "Bottle", "Bottle"
    CAN = "Can", "Can"
    BOX = "Box", "Box"
    BAG = "Bag", "Bag"
    POUCH = "Pouch", "Pouch"
    CARTON = "Carton", "Carton"
    JAR = "Jar", "Jar"
    SACHET = "Sachet", "Sachet"
    TETRA_PACK = "Tetra Pack", "Tetra Pack"


class ItemStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    INACTIVE = "inactive", "Inactive"
    DISCONTINUED = "discontinued", "Discontinued"


class CategoryStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    INACTIVE = "inactive", "Inactive"
