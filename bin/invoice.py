#!/usr/bin/env python

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cli_command_parser import Command, Counter, Option, main

from text_block_layout import Block

log = logging.getLogger(__name__)

PAGE_WIDTH = 70
LEFT_MARGIN = 2
INFO_LEFT_MARGIN = 10
RIGHT_COLUMN = PAGE_WIDTH - 32
TOTALS_WIDTH = 22
COLUMN_WIDTHS = (36, 12, 10, 12)  # description, unit price, quantity, amount


@dataclass
class Item:
    description: str
    unit_price: float
    quantity: int

    @property
    def amount(self) -> float:
        return self.unit_price * self.quantity


@dataclass
class Invoice:
    date: str
    invoice_no: str
    company_name: str
    company_slogan: str
    company_address: list[str]
    bill_to: list[str]
    ship_to: list[str]
    items: list[Item] = field(default_factory=list)
    tax_rate: float = 0.0

    @property
    def subtotal(self) -> float:
        return sum(item.amount for item in self.items)

    @property
    def sales_tax(self) -> float:
        return self.tax_rate * self.subtotal

    @property
    def total(self) -> float:
        return self.subtotal + self.sales_tax


class InvoiceDemo(Command):
    """Renders a sample invoice using text blocks"""

    verbose = Counter('-v', help='Increase logging verbosity (can specify multiple times)')
    tax_rate = Option('-t', type=float, default=0.08, help='The sales tax rate to apply')

    def _init_command_(self):
        log_fmt = '%(asctime)s %(levelname)s %(name)s %(lineno)d %(message)s' if self.verbose > 1 else '%(message)s'
        logging.basicConfig(level=logging.DEBUG if self.verbose else logging.INFO, format=log_fmt)

    def main(self):
        invoice = Invoice(
            date='2020/01/01',
            invoice_no='12345678',
            company_name='Acme',
            company_slogan='Where customers are billed',
            company_address=['Address', 'City, State ZIP'],
            bill_to=['Name', 'Address', 'City, State ZIP'],
            ship_to=['Name', 'Address', 'City, State ZIP'],
            items=[Item('Toilet paper, 13-pack', 3.95, 200), Item('Coffee, medium ground, 3 lbs', 6.95, 4)],
            tax_rate=self.tax_rate,
        )
        print(render_invoice(invoice))


def info(title: str, lines: list[str]) -> Block:
    left = Block.of(title).pad_to_width_left(INFO_LEFT_MARGIN)
    return left.pad_right(1).beside_top(Block.empty().add_multiple_texts(lines))


def money(value: float, width: int) -> Block:
    return Block.of(f'$ {value:.2f}').pad_to_width_left(width)


def columns(*blocks: Block) -> Block:
    row = Block.empty()
    for block in blocks:
        row = row.beside_top(block)
    return row


def item_row(item: Item) -> Block:
    desc_w, unit_w, quant_w, amount_w = COLUMN_WIDTHS
    return columns(
        Block.of(item.description).pad_to_width_right(desc_w),
        money(item.unit_price, unit_w),
        Block.of(item.quantity).pad_to_width_left(quant_w),
        money(item.amount, amount_w),
    )


def hline(width: int, char: str = '─') -> Block:
    return Block.of_height(1).pad_right(width, char)


def render_invoice(invoice: Invoice) -> Block:
    company_info = (
        Block.of(invoice.company_name)
        .add_text(invoice.company_slogan)
        .pad_bottom(1)
        .add_multiple_texts(invoice.company_address)
    )
    invoice_info = (
        Block.of('INVOICE')
        .pad_to_width_left(10)
        .pad_bottom(1)
        .stack_left(info('DATE', [invoice.date]))
        .stack_left(info('INVOICE #', [invoice.invoice_no]))
    )
    top = company_info.pad_top(2).in_front_of(invoice_info.pad_left(RIGHT_COLUMN))
    addresses = info('BILL TO', invoice.bill_to).in_front_of(info('SHIP TO', invoice.ship_to).pad_left(RIGHT_COLUMN))

    desc_w, unit_w, quant_w, amount_w = COLUMN_WIDTHS
    header = columns(
        Block.of('DESCRIPTION').pad_to_width_right(desc_w),
        Block.of('UNIT PRICE').pad_to_width_left(unit_w),
        Block.of('QUANTITY').pad_to_width_left(quant_w),
        Block.of('AMOUNT').pad_to_width_left(amount_w),
    )
    items = Block.empty()
    for item in invoice.items:
        items = items.stack_left(item_row(item))

    line_items = header.stack_left(hline(PAGE_WIDTH)).stack_left(items).stack_left(hline(PAGE_WIDTH))

    totals = None
    for label, value in (
        ('SUBTOTAL', money(invoice.subtotal, 12)),
        ('TAX RATE', Block.of(f'{invoice.tax_rate * 100:.0f} %').pad_to_width_left(12)),
        ('SALES TAX', money(invoice.sales_tax, 12)),
        ('TOTAL', money(invoice.total, 12)),
    ):
        line = Block.of(label).beside_top(value)
        totals = line if totals is None else totals.stack_right(hline(TOTALS_WIDTH)).stack_right(line)

    totals = totals.stack_right(hline(TOTALS_WIDTH, '═')).pad_to_width_left(PAGE_WIDTH)
    log.debug(f'Rendering invoice with {len(invoice.items)} items')
    return (
        top.pad_bottom(3)
        .stack_left(addresses)
        .pad_bottom(3)
        .stack_left(line_items)
        .stack_left(totals)
        .pad_left(LEFT_MARGIN)
    )


if __name__ == '__main__':
    main()
