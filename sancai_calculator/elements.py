"""Соответствие чисел пяти элементам и три таланта"""
from .models import Element, ElementAssignment, GridSet, SancaiTriple


# Последняя цифра числа -> элемент
NUMBER_TO_ELEMENT = {
    1: Element.WOOD, 2: Element.WOOD,
    3: Element.FIRE, 4: Element.FIRE,
    5: Element.EARTH, 6: Element.EARTH,
    7: Element.METAL, 8: Element.METAL,
    9: Element.WATER, 0: Element.WATER,
}


def element_of(number: int) -> Element:
    """Элемент числа по остатку от деления на 10"""
    if number < 0:
        raise ValueError(f"Число решетки не может быть отрицательным: {number}")
    return NUMBER_TO_ELEMENT[number % 10]


def assign_elements(grids: GridSet) -> ElementAssignment:
    """Элементы всех пяти решеток, каждая независимо"""
    return ElementAssignment(
        heaven=element_of(grids.heaven),
        human=element_of(grids.human),
        earth=element_of(grids.earth),
        total=element_of(grids.total),
        outer=element_of(grids.outer),
    )


def compose_sancai(grids: GridSet) -> SancaiTriple:
    """Три таланта берутся только из решеток неба, человека и земли"""
    return SancaiTriple(
        heaven=element_of(grids.heaven),
        human=element_of(grids.human),
        earth=element_of(grids.earth),
    )
